"""
Generators — produce source files from a computed generation plan.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile``; writing it to disk is the caller's job.
"""
