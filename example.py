import datetime

from decay_toolbox.source_tracking import ActivityUnit, Reference, find_next_target
from decay_toolbox.source_tracking.isotopes import tc99m
from decay_toolbox.source_tracking.schedule import plan_alerts


my_reference = Reference(
    isotope=tc99m,
    calibration_activity=100,
    unit=ActivityUnit.mCi,
    calibration_date=datetime.datetime.now(tz=datetime.timezone.utc),
    reference_name="Hot lab vial",
)
my_reference.add_target("Patient dose", 30)
my_reference.add_target("Disposal Limit", 37, ActivityUnit.MBq)

print(my_reference.get_current_activity())
print(find_next_target(my_reference))
for alert in plan_alerts(my_reference):
    print(alert.title, alert.fire_date)
