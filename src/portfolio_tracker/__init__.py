"""Portfolio tracking: contribution allocation and accounting engine."""
