"""API module for Podium.

Boundary (api layer):
- Obtains the current snapshot from the configured source
- Passes it into aggregation calls and returns payloads for the dashboard
- Forbidden: computing statistics inline, mutating the snapshot
"""
