"""PostgreSQL-only exclusion constraint: active bookings of a listing never overlap.

Other backends rely on the per-listing lock taken by the booking services.
"""

from django.db import migrations


CREATE_CONSTRAINT = """
CREATE EXTENSION IF NOT EXISTS btree_gist;
ALTER TABLE bookings_booking
    ADD CONSTRAINT booking_no_overlap
    EXCLUDE USING gist (
        listing_id WITH =,
        tstzrange(arrival, departure, '[)') WITH &&
    )
    WHERE (status IN ('PENDING', 'CONFIRMED'));
"""

DROP_CONSTRAINT = """
ALTER TABLE bookings_booking DROP CONSTRAINT IF EXISTS booking_no_overlap;
"""


def add_exclusion_constraint(apps, schema_editor):  # type: ignore
    if schema_editor.connection.vendor != "postgresql":
        return
    schema_editor.execute(CREATE_CONSTRAINT)


def remove_exclusion_constraint(apps, schema_editor):  # type: ignore
    if schema_editor.connection.vendor != "postgresql":
        return
    schema_editor.execute(DROP_CONSTRAINT)


class Migration(migrations.Migration):

    dependencies = [
        ("bookings", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(add_exclusion_constraint, remove_exclusion_constraint),
    ]
