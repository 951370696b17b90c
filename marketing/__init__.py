"""
Event marketing notifications.

Responsibilities:
- Hold a static table of cities and an in-memory list of events.
- Select events for a customer by city, birthday proximity, or distance.
- Sort events by a field name chosen at runtime.
- Hand every selected (customer, event) pair to a notification sink.
"""
