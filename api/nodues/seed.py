"""Fixed sample data for the mock store and the seeding script."""

from typing import List

from .schemas import Assets, EmployeeRecord

DEFAULT_ASSETS = Assets(
    logo_url="https://placehold.co/400x100/transparent/08bd80?text=unacademy&font=playfair",
    stamp_url="https://placehold.co/150x150/transparent/darkblue?text=STAMP&font=oswald",
    watermark_url="https://placehold.co/400x400/transparent/e0e0e0?text=UNACADEMY&font=roboto",
    signature_url="https://placehold.co/200x60/transparent/black?text=Saurabh+Suman&font=dancing-script",
)

SAMPLE_RECORDS: List[EmployeeRecord] = [
    EmployeeRecord(
        educator_id="131830246",
        name="Mr. Raj Vardhan",
        designation="Senior Mathematics Faculty",
        division="JEE Division",
        centre_name="Unacademy Centre Samastipur",
        period_start="April 2025",
        period_end="November 2025",
        issue_date="07 / 12 / 2025",
        place="Samastipur",
        signatory_name="Saurabh Suman",
        signatory_designation="Centre Head",
    ),
    EmployeeRecord(
        educator_id="999999999",
        name="Ms. Anita Sharma",
        designation="Physics Faculty",
        division="NEET Division",
        centre_name="Unacademy Centre Delhi",
        period_start="January 2024",
        period_end="December 2024",
        issue_date="15 / 01 / 2025",
        place="New Delhi",
        signatory_name="Amit Kumar",
        signatory_designation="Regional Manager",
    ),
]
