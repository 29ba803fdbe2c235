"""NetLink Planner: transmission medium selection service."""
