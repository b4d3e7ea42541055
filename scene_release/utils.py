"""
Utility functions for scene_release
"""
import json
import shutil
from dataclasses import asdict


class CustomJSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for parse results"""
    def default(self, obj):
        if hasattr(obj, 'to_dict'):
            return obj.to_dict()
        elif hasattr(obj, '__dataclass_fields__'):  # Handle other dataclasses
            return asdict(obj)
        elif isinstance(obj, (set, frozenset)):
            return sorted(obj)
        return super().default(obj)


def to_json(obj, indent: int = 2) -> str:
    return json.dumps(obj, cls=CustomJSONEncoder, indent=indent, ensure_ascii=False)


def line_separator(title: str = "", char: str = "=") -> str:
    """Full terminal width separator line with an optional centered title"""
    width = shutil.get_terminal_size((80, 20)).columns
    if not title:
        return char * width
    return f" {title} ".center(width, char)
