# This file marks the schemas package for preview API response models.
# Shared envelope fields live in `common`; endpoint payloads live beside it.
