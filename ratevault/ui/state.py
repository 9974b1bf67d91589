"""State management for the RateVault UI."""
import json
import logging
from typing import Any, Optional, Tuple

import streamlit as st

from ratevault import ConverterConfiguration, JsonFileStorage, PinnedUnitStore
from ratevault.config import normalize_number_system
from ratevault.errors import ConversionError
from ratevault.formatting import format_for_input, parse_number_string
from ratevault.settings import load_config
from ratevault.storage import PinnedUnitStorage

from .utils import unit_widget_key, UNIT_WIDGET_PREFIX

logger = logging.getLogger(__name__)

STORE_KEY = "unit_store"
NUMBER_SYSTEM_KEY = "number_system"
CATEGORY_SELECTOR_KEY = "category_selector"
NUMBER_SYSTEM_SELECTOR_KEY = "number_system_selector"
PIN_SELECTOR_KEY = "unit_to_pin"


def clear_unit_widget_state() -> None:
    """Remove cached text inputs so they are rebuilt from the store."""
    removed_count = 0
    for key in list(st.session_state.keys()):
        if str(key).startswith(UNIT_WIDGET_PREFIX):
            st.session_state.pop(key, None)
            removed_count += 1
    logger.debug("Cleared %d unit widget keys", removed_count)


def get_store() -> PinnedUnitStore:
    return st.session_state[STORE_KEY]


def get_number_system() -> str:
    return st.session_state.get(NUMBER_SYSTEM_KEY, "international")


def sync_unit_widgets(skip_unit_id: Optional[str] = None) -> None:
    """Write the store's values into the text inputs (callbacks only)."""
    number_system = get_number_system()
    for pinned in get_store().pinned_units:
        if pinned.unit.id == skip_unit_id:
            continue
        st.session_state[unit_widget_key(pinned.unit.id)] = format_for_input(pinned.value, number_system)


def on_unit_value_change(unit_id: str) -> None:
    raw_text = st.session_state.get(unit_widget_key(unit_id), "")
    get_store().update_value(unit_id, parse_number_string(raw_text))
    # Leave the edited field exactly as typed
    sync_unit_widgets(skip_unit_id=unit_id)


def on_category_change() -> None:
    category_id = st.session_state[CATEGORY_SELECTOR_KEY]
    store = get_store()
    store.set_category(category_id)
    store.storage.save_active_category(category_id)
    st.session_state.pop(PIN_SELECTOR_KEY, None)
    clear_unit_widget_state()


def on_number_system_change() -> None:
    number_system = normalize_number_system(st.session_state[NUMBER_SYSTEM_SELECTOR_KEY])
    st.session_state[NUMBER_SYSTEM_KEY] = number_system
    get_store().storage.save_number_system(number_system)
    sync_unit_widgets()


def on_pin_unit() -> None:
    unit_id = st.session_state.get(PIN_SELECTOR_KEY)
    if not unit_id:
        return
    store = get_store()
    try:
        store.pin_unit(unit_id)
    except ConversionError as exc:
        st.session_state["_pin_error"] = str(exc)
        return
    st.session_state[unit_widget_key(unit_id)] = format_for_input(store.get_value(unit_id) or 0.0, get_number_system())
    st.session_state.pop(PIN_SELECTOR_KEY, None)


def on_unpin_unit(unit_id: str) -> None:
    get_store().unpin_unit(unit_id)
    st.session_state.pop(unit_widget_key(unit_id), None)


def on_reset_units() -> None:
    get_store().reset_pinned_units()
    clear_unit_widget_state()


def apply_configuration(config: ConverterConfiguration) -> None:
    """Replace the stored preferences with ``config`` and reload the store."""
    store = get_store()
    store.storage.store(config)
    store.set_category(config.active_category)
    st.session_state[NUMBER_SYSTEM_KEY] = config.number_system
    st.session_state.pop(CATEGORY_SELECTOR_KEY, None)
    st.session_state.pop(NUMBER_SYSTEM_SELECTOR_KEY, None)
    clear_unit_widget_state()


def initialize_session_state(storage: Optional[PinnedUnitStorage] = None) -> None:
    if STORE_KEY not in st.session_state:
        if storage is None:
            storage = JsonFileStorage(load_config().storage_path())
        st.session_state[STORE_KEY] = PinnedUnitStore(storage, storage.get_active_category())
        st.session_state[NUMBER_SYSTEM_KEY] = storage.get_number_system()


def safe_load_configuration(source: Any) -> Tuple[Optional[ConverterConfiguration], str]:
    """
    Load saved preferences from a JSON source (string path or file-like), returning (config, error_message).
    If successful, error_message is empty.
    """
    try:
        return ConverterConfiguration.from_json(source), ""
    except json.JSONDecodeError:
        return None, "Invalid JSON format."
    except (OSError, ValueError, TypeError) as e:
        return None, f"Failed to load preferences: {e}"
