"""Domain services: money aggregation, chart series, numbering and search."""
