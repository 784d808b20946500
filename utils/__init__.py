"""
Collaborators of the union-find core.

Modules:
    loader      - Connection streams and allowlist files
    search      - Binary search and allowlist filtering
    generators  - Random and adversarial connection sequences
    analysis    - Depths, heights and reference partitions
    benchmark   - Timing of the variants
"""
