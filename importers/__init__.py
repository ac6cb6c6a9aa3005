"""
Writers for the target Pivotal Tracker import file
"""
from .pivotal_importer import csv_value_safe, write_pivotal_csv

__all__ = ['csv_value_safe', 'write_pivotal_csv']
