"""UI components for the RateVault application."""
import hashlib
import io
from typing import List

import streamlit as st

from ratevault import list_categories
from ratevault.formatting import INDIAN, INTERNATIONAL, format_for_input, number_system_label
from .state import (
    CATEGORY_SELECTOR_KEY,
    NUMBER_SYSTEM_SELECTOR_KEY,
    PIN_SELECTOR_KEY,
    apply_configuration,
    get_number_system,
    get_store,
    on_category_change,
    on_number_system_change,
    on_pin_unit,
    on_reset_units,
    on_unit_value_change,
    on_unpin_unit,
    safe_load_configuration,
)
from .utils import catalog_frame, category_label, unit_widget_key

_UPLOAD_DIGEST_KEY = "_prefs_upload_digest"
_GRID_COLUMNS = 3
_NUMBER_SYSTEM_LABELS = {
    INTERNATIONAL: "International (1,234,567)",
    INDIAN: "Indian (12,34,567)",
}


def render_sidebar() -> None:
    with st.sidebar:
        st.header("Settings")
        store = get_store()

        categories = list_categories()
        category_ids = [category.id for category in categories]
        labels = {category.id: category_label(category) for category in categories}
        current = store.active_category
        st.selectbox(
            "Category",
            category_ids,
            index=category_ids.index(current) if current in category_ids else 0,
            key=CATEGORY_SELECTOR_KEY,
            format_func=lambda category_id: labels[category_id],
            on_change=on_category_change,
        )

        number_systems = [INTERNATIONAL, INDIAN]
        st.radio(
            "Number System",
            number_systems,
            index=number_systems.index(get_number_system()),
            key=NUMBER_SYSTEM_SELECTOR_KEY,
            format_func=lambda value: _NUMBER_SYSTEM_LABELS[value],
            on_change=on_number_system_change,
        )

        st.button("Reset pinned units", key="reset_pinned_units", on_click=on_reset_units)

        _render_preferences_section()


def render_pinned_units() -> None:
    store = get_store()
    category = store.category
    if category is None:
        st.warning(f"Unknown category '{store.active_category}'. Pick another one in the sidebar.")
        return

    st.subheader(category_label(category))
    pinned_units = store.pinned_units
    if not pinned_units:
        st.info("No units pinned. Add one below.")

    number_system = get_number_system()
    columns = st.columns(_GRID_COLUMNS)
    for index, pinned in enumerate(pinned_units):
        unit = pinned.unit
        key = unit_widget_key(unit.id)
        if key not in st.session_state:
            st.session_state[key] = format_for_input(pinned.value, number_system)
        with columns[index % _GRID_COLUMNS]:
            st.text_input(
                f"{unit.name} ({unit.symbol})",
                key=key,
                on_change=on_unit_value_change,
                args=(unit.id,),
            )
            if abs(pinned.value) >= 1e3:
                st.caption(number_system_label(abs(pinned.value), number_system))
            st.button("Unpin", key=f"unpin_{unit.id}", on_click=on_unpin_unit, args=(unit.id,))

    _render_pin_selector(store.get_available_units())


def _render_pin_selector(available_units: List) -> None:
    pin_error = st.session_state.pop("_pin_error", None)
    if pin_error:
        st.error(pin_error)
    if not available_units:
        st.caption("Every unit in this category is pinned.")
        return

    names = {unit.id: f"{unit.name} ({unit.symbol})" for unit in available_units}
    select_col, button_col = st.columns([3, 1], vertical_alignment="bottom")
    select_col.selectbox(
        "Add unit",
        list(names),
        key=PIN_SELECTOR_KEY,
        format_func=lambda unit_id: names.get(unit_id, unit_id),
    )
    button_col.button("Pin", key="pin_unit", on_click=on_pin_unit)


def render_catalog_table() -> None:
    store = get_store()
    category = store.category
    if category is None:
        return
    with st.expander(f"All {category.name} units"):
        st.dataframe(
            catalog_frame(category, store.pinned_unit_ids),
            hide_index=True,
            use_container_width=True,
        )


def _render_preferences_section() -> None:
    st.markdown("---")
    st.subheader("Preferences")
    load_feedback = st.session_state.pop("_load_feedback", None)
    if load_feedback:
        st.success(load_feedback)

    configuration = get_store().storage.load()
    st.download_button(
        "⬇️ Export",
        data=configuration.to_json().encode("utf-8"),
        file_name="ratevault-preferences.json",
        mime="application/json",
        key="export_preferences",
    )

    uploaded_file = st.file_uploader("Load preferences JSON", type="json", key="prefs_upload")
    if uploaded_file is None:
        st.session_state.pop(_UPLOAD_DIGEST_KEY, None)
        return

    file_bytes = uploaded_file.getvalue()
    digest = hashlib.sha256(file_bytes).hexdigest()
    if st.session_state.get(_UPLOAD_DIGEST_KEY) == digest:
        return

    loaded, error = safe_load_configuration(io.StringIO(file_bytes.decode("utf-8", errors="replace")))
    if loaded is None:
        st.error(error)
        return

    apply_configuration(loaded)
    st.session_state[_UPLOAD_DIGEST_KEY] = digest
    display_name = getattr(uploaded_file, "name", "uploaded")
    st.session_state["_load_feedback"] = f"Loaded preferences from '{display_name}'."
    st.rerun()
