"""Domain logic between the data source and the geometry layer.

Dependency rule: analysis/ imports datasource *models* only. It never loads
data, computes pixel positions or produces HTML.

Modules:
  - monthly: daily records -> monthly records with precomputed extrema
"""

from temperature_heatmap.analysis.monthly import (
    MonthlyRecord,
    count_degraded,
    has_valid_date,
    nan_max,
    nan_min,
    to_monthly_records,
)

__all__ = [
    "MonthlyRecord",
    "count_degraded",
    "has_valid_date",
    "nan_max",
    "nan_min",
    "to_monthly_records",
]
