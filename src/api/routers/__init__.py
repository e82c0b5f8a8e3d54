# This file marks the routers package for the preview API.
# Health and report endpoints live in sibling modules and are mounted by `src.api.app`.
