"""Data Maturity Assessment scoring service.

Scores survey answers per subdomain, aggregates them into an overall
maturity score, and maps that score onto a named maturity tier. Also
assembles the inputs handed to the recommendation generator.
"""

__version__ = "0.1.0"
