"""Device Manager: a CRUD REST service for Device records."""
