"""Template publishing exports."""

from nerakit.publish.templates import (
    copy_templates,
    find_templates,
    publish_all_templates,
    publish_template,
    publish_templates,
    vendor_dir,
)

__all__ = [
    "copy_templates",
    "find_templates",
    "publish_all_templates",
    "publish_template",
    "publish_templates",
    "vendor_dir",
]
