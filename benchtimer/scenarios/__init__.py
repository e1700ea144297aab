from .arrays import array_supplier, ordered_array, partial_array, random_array, reverse_array
from .sorting import insertion_sort, is_sorted
from .union_find import UnionFind, count_pairs

__all__ = [
    'array_supplier',
    'ordered_array',
    'partial_array',
    'random_array',
    'reverse_array',
    'insertion_sort',
    'is_sorted',
    'UnionFind',
    'count_pairs',
]
