"""Services: long-lived configuration state."""
