"""Container classes: linked and fixed-capacity lists, intrusive lists, fixed arrays, allocators, bounded and copy-on-write strings, and search helpers."""

__version__ = "0.1.0"

__all__ = [
    "algorithm",
    "allocator",
    "fixed_array",
    "linked_list",
    "fixed_list",
    "intrusive_list",
    "intrusive_slist",
    "fixed_substring",
    "cow_string",
]