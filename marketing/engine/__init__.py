"""
Marketing engine.

Responsibilities:
- Select events for a customer by city, birthday proximity and distance.
- Notify the customer of every selected event through a sink.
- Sort the event collection by a whitelisted field name.
"""
