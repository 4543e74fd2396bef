"""
Job Health Heuristics - Performance diagnostics for completed DAG jobs

This package grades resource-usage signals collected from distributed DAG
jobs (DAG -> vertex -> task) into severity levels for automated job-health
reporting.

Package Structure:
    - core: Infrastructure (logging)
    - config: Heuristic configuration data and environment loading
    - domain: Domain models (Severity, job records, aggregates, results)
    - heuristics: Heuristic implementations (GC efficiency)
    - utils: Statistics, parameter parsing, scoring, error handling
"""

__version__ = "1.0.0"
__author__ = "Job Health Team"
