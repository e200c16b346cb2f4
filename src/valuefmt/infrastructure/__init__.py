"""Infrastructure layer — string-table files and font rasterization.

This layer depends on stdlib and third-party libs (Pillow).
It may import domain value types (dependency direction: infrastructure ->
domain) but must never import from services, commands, or output.
"""
