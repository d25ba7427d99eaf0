"""
Contains helper functions used by the predicates
"""
from .arguments import loosely_equal, satisfies_type, target_values, to_number
