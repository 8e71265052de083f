"""FleetCare — fleet maintenance scheduling and voyage analytics."""
