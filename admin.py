import streamlit as st
import pandas as pd
from typing import List

from app.core.config import settings
from app.models.db_models import BookingRecord
from app.services.booking_service import BookingStore
from app.storage.factory import build_key_value_store

PAGE_SIZE = 20

COLUMNS = ["id", "car_model", "start_date", "end_date", "location", "user_id", "price", "is_paid", "created_at", "updated_at"]

TIMESTAMP_COLUMNS = ("start_date", "end_date", "created_at", "updated_at")

def _to_timestamp(value):
    # nat64 goes beyond what pandas can hold (year 2262), those show up as NaT
    if value is None or value > pd.Timestamp.max.value:
        return None
    return pd.Timestamp(value, unit="ns")

def bookings_to_frame(records: List[BookingRecord]) -> pd.DataFrame:
    """Bookings as a DataFrame, nanosecond timestamps converted to datetimes."""
    rows = []
    for record in records:
        row = record.model_dump()
        for column in TIMESTAMP_COLUMNS:
            row[column] = _to_timestamp(row[column])
        rows.append(row)

    df = pd.DataFrame(rows, columns=COLUMNS)
    for column in TIMESTAMP_COLUMNS:
        df[column] = pd.to_datetime(df[column])
    return df

def paid_count(records: List[BookingRecord]) -> int:
    return sum(1 for r in records if r.is_paid)

def main():
    st.set_page_config(
        page_title="Car Rental Admin",
        page_icon="🚗",
        layout="centered"
    )

    st.title("Car Rental - Admin Panel")

    # Reads whatever backend the API uses (point STORAGE_BACKEND=sqlite at the same file)
    store = BookingStore(build_key_value_store(settings))

    if st.button("Refresh"):
        st.rerun()

    count_result = store.count_all()
    all_result = store.list_all()
    if not count_result.is_ok or not all_result.is_ok:
        failed = count_result if not count_result.is_ok else all_result
        st.error(f"Error reading bookings: {failed.error.message}")
        return

    col1, col2 = st.columns(2)
    col1.metric("Total bookings", count_result.value)
    col2.metric("Paid bookings", paid_count(all_result.value))

    keyword = st.text_input("Search car model")
    if keyword:
        result = store.search(keyword)
    else:
        page = st.number_input("Page", min_value=1, value=1, step=1)
        result = store.paginate(int(page), PAGE_SIZE)

    if not result.is_ok:
        st.error(result.error.message)
    elif result.value:
        st.subheader("Bookings")
        st.dataframe(
            bookings_to_frame(result.value),
            use_container_width=True,
            column_config={
                "start_date": st.column_config.DatetimeColumn("Start", format="D.M.YYYY HH:mm"),
                "end_date": st.column_config.DatetimeColumn("End", format="D.M.YYYY HH:mm"),
                "created_at": st.column_config.DatetimeColumn("Created", format="D.M.YYYY HH:mm"),
                "updated_at": st.column_config.DatetimeColumn("Updated", format="D.M.YYYY HH:mm"),
                "car_model": "Car model",
                "user_id": "User",
                "is_paid": "Paid",
                "id": "ID"
            }
        )
    else:
        st.info("No bookings found.")

    st.markdown("---")
    st.caption("Car Rental Booking Store")

if __name__ == "__main__":
    main()
