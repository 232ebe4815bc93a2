"""
Shop Query - Functional collection queries over customers, orders and products

A stateless query engine that filters, maps, groups and aggregates fully
materialized entity collections, plus an application service that runs the
queries and reports their results through structured logging.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
