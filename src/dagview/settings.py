# settings.py
from __future__ import annotations
import os

NODE_WIDTH = int(os.environ.get("DAGVIEW_NODE_WIDTH", "180"))
NODE_HEIGHT = int(os.environ.get("DAGVIEW_NODE_HEIGHT", "70"))

# background hints
CONDITION_COLOR = os.environ.get("DAGVIEW_CONDITION_COLOR", "cornsilk")
ON_EXIT_COLOR = os.environ.get("DAGVIEW_ON_EXIT_COLOR", "#eee")

# task name prefix the compiler uses when it wraps a workflow in its exit handler
EXIT_HANDLER_PREFIX = os.environ.get("DAGVIEW_EXIT_HANDLER_PREFIX", "exit-handler")
ON_EXIT_LABEL_PREFIX = "onExit - "
