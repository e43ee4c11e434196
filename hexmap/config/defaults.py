# hexmap/config/defaults.py
"""Default configuration values for the hexagon layer."""

from pathlib import Path

# Project path
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / 'logs'

PATHS = {
    'project_root': str(PROJECT_ROOT),
    'logs_dir': str(LOGS_DIR),
}

# Source data is Web Mercator, H3 needs WGS84
PROJECTION = {
    'source_crs': 'EPSG:3857',
    'target_crs': 'EPSG:4326',
}

FEATURES = {
    'color_attribute': 'COLOR_HEX',
    'default_color': '#999999',
}

# (max zoom, H3 resolution) steps; zooms above the last step use max_resolution
RESOLUTION = {
    'zoom_steps': [
        [4, 3],
        [5, 5],
        [6, 6],
        [7, 7],
        [9, 8],
        [11, 9],
    ],
    'max_resolution': 10,
}

STYLE = {
    'color': '#222',
    'weight': 1,
    'opacity': 0.8,
    'fill_opacity': 0.8,
}

MAP = {
    'center': [23.8859, 45.0792],  # lat, lng
    'zoom': 6,
    'max_zoom': 18,
}

RENDERING = {
    'coalesce_view_changes': False,
}

LOGGING = {
    'level': 'INFO',
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    'file': LOGS_DIR / 'hexmap.log',
    'max_file_size': 10 * 1024 * 1024,  # 10MB
    'backup_count': 5,
}
