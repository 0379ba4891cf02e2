"""External services: object storage, exchange rates, IP geolocation."""
