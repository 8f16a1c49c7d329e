"""
CLI Subpackage.

Modules:
    - ``__main__``: The argparse definition and dispatcher.
    - ``commands``: Command handlers (check, validate, matrix, b64-unsafe).
    - ``matrix``: Rendering of the merge compatibility matrix.
"""
