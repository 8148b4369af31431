"""Generation pipeline: discovery, descriptors, checksums, indices, cleanup."""
