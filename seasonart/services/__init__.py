"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities, ports, and external systems.

This layer contains:
- season_image_resolver: pure season filtering and candidate ranking
- season_images: store orchestration and "no artwork" recovery

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
