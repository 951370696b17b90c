"""
Reference data for the marketing engine.

Responsibilities:
- Define the Event, Customer and City schemas.
- Expose the static city coordinate table.
- Provide the demo events and customer.
"""
