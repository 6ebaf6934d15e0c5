"""HealthTrack personal health-tracking backend."""
