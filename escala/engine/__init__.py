"""
Scheduling engine: pure functions over a loaded snapshot.

- schedule_codec: work_schedule JSON <-> mapping
- time_window: HH:MM and HH:MM-HH:MM strings
- projector: service orders active on each weekday
- availability: busy/available status and departments per employee
- labels: foreign key and weekday display names
"""
