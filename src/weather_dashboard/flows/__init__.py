"""
Prefect flows for the dashboard pipeline.

Flows:
- fetch: load-city downloads current weather, forecast, and air quality
- build: build-dashboard renders the cached payloads into a static page

Usage (local):
    python -m weather_dashboard.flows.fetch Paris
    python -m weather_dashboard.flows.build
"""
