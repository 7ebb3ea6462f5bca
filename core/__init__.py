"""habitrack core library — habit data model, analytics and persistence.

Public API re-exports for convenient imports:
    from core import Registry, load_registry, current_streak, ...
"""

# Errors
from core.errors import (
    HabitError,
    ValidationError,
    NotFoundError,
    SelectionError,
    LoadError,
    SaveError,
)

# Settings & paths
from core.workspace import (
    Settings,
    load_settings,
    get_user_timezone,
    today,
    data_path,
    config_path,
    log_path,
)

# File I/O
from core.fileio import (
    read_text,
    read_yaml,
    write_text_atomic,
)

# Models
from core.models import (
    DateSet,
    Registry,
    HabitSummary,
    normalize_name,
)

# Habit operations
from core.habits import (
    add_habit,
    mark_done,
    habit_choices,
    select_habit,
)

# Analytics
from core.analytics import (
    current_streak,
    best_streak,
    window_dates,
    heatmap,
    summarize,
)

# Persistence
from core.codec import (
    parse_line,
    parse_date,
    load_into,
    load_registry,
    dump_registry,
    save_registry,
)
