"""
Prefect flows for the heatmap pipeline.

Flows:
- build: Load the daily table, aggregate by month, render site/index.html

Usage (local):
    python -m temperature_heatmap.flows.build

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m temperature_heatmap.flows.build
"""
