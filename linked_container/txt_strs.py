TXTS = {
    "title": "=== LinkedList Container Demo ===",
    "after_add": "Container after adding elements: ",
    "size": "Size: ",
    "is_empty": "Is empty: ",
    "sections": {
        "access": "\n--- Access elements by index ---",
        "exists": "\n--- Check element existence ---",
        "index": "\n--- Find element indexes ---",
        "remove_index": "\n--- Remove element by index ---",
        "remove_value": "\n--- Remove element by value ---",
        "clear": "\n--- Clear container ---",
    },
    "element_at": "Element at index %d: ",
    "contains": "Contains '%s': ",
    "index_of": "Index of '%s': ",
    "removed_at": "Removed element at index %d: ",
    "removed_value": "'%s' removed: ",
    "after_remove": "Container after removal: ",
    "after_clear": "Container after clear: ",
    "done": "\n=== Demo completed successfully ===",
    True: "true",
    False: "false",
}
