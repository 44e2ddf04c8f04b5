"""
relstore - In-Process Relational Store

A small relational store: databases hold uniquely keyed tables of typed
scalar values supporting select, update and primary-key equijoin.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
