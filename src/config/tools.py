import json
from pathlib import Path
from typing import Dict, Any, List, Callable, Optional

app_root = Path(__file__).parent.parent.parent

DEFAULT_CONFIG = {
    "tools": {},
    "password_strength": {"guesses_per_second": 1e9},
    "i18n": {"default_locale": "en"},
}

# Store for tools configuration. Labels are translation keys resolved per request.
TOOLS = [
    {
        "id": "base-converter",
        "name_key": "tools.base-converter.title",
        "description_key": "tools.base-converter.description",
        "keywords_key": "tools.base-converter.keywords",
        "path": "/tools/base-converter",
        "api": "/api/base-converter/convert",
        "icon": "🔢",
        "created_at": None
    },
    {
        "id": "password-strength-analyser",
        "name_key": "tools.password-strength-analyser.title",
        "description_key": "tools.password-strength-analyser.description",
        "keywords_key": "tools.password-strength-analyser.keywords",
        "path": "/tools/password-strength-analyser",
        "api": "/api/password-strength/analyze",
        "icon": "🔐",
        "created_at": "2023-06-24"
    }
]


def load_app_config(config_file: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from config/config.json, filling in defaults for missing sections"""
    config_file = config_file or app_root / "config" / "config.json"
    config = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            print(f"Warning: Failed to read {config_file}: {e}")
            return config
        for section, values in loaded.items():
            if isinstance(values, dict):
                config.setdefault(section, {}).update(values)
    return config


def is_tool_enabled(tool_id: str, config: Dict[str, Any]) -> bool:
    """Check if a tool is enabled in config. Defaults to True if not specified."""
    tool_conf = config.get('tools', {}).get(tool_id, {})
    return tool_conf.get('enabled', True)


def get_enabled_tools(config: Dict[str, Any], translate: Callable[[str, Optional[str]], str]) -> List[Dict[str, Any]]:
    """Enabled tools with their labels resolved through translate."""
    tools = []
    for tool in TOOLS:
        if not is_tool_enabled(tool['id'], config):
            continue
        keywords = translate(tool['keywords_key'], '')
        tools.append({
            "id": tool['id'],
            "name": translate(tool['name_key'], tool['id']),
            "description": translate(tool['description_key'], ''),
            "tags": [k.strip() for k in keywords.split(',') if k.strip()],
            "path": tool['path'],
            "api": tool['api'],
            "icon": tool['icon'],
            "created_at": tool['created_at']
        })
    return tools
