"""
Backend Dev Job Scout – Streamlit frontend.
No business logic in layout; fetching, filtering and favorites live in agents/services.
"""

from typing import List

import streamlit as st

from job_scout import config
from job_scout.agents.search_agent import JobFeed
from job_scout.config import DATE_FILTER_LABELS, PAGE_TITLE
from job_scout.schemas.job import Job
from job_scout.schemas.state import DateFilter, FilterState
from job_scout.services import agent_service
from job_scout.services.favorites_store import FavoritesStore
from job_scout.services.filter_service import available_locations, filter_jobs
from job_scout.services.storage_service import JsonFileStorage
from job_scout.utils.date_parser import classify_recency, resolve_now
from job_scout.utils.helpers import job_item_key, pluralize

DATE_FILTER_OPTIONS = [DateFilter.ALL.value, DateFilter.WEEK.value, DateFilter.TODAY.value]
DESCRIPTION_PREVIEW_CHARS = 280


@st.cache_resource
def _favorites_store() -> FavoritesStore:
    """One favorites store per process, shared by every session."""
    return FavoritesStore(JsonFileStorage(config.STORAGE_PATH))


def _init_session() -> bool:
    """Create per-session state. Returns True on the first run of a session."""
    first_run = "feed" not in st.session_state
    if first_run:
        st.session_state["feed"] = JobFeed(transport=agent_service.call_agent)
    st.session_state.setdefault("search_keyword", "")
    st.session_state.setdefault("location_filter", [])
    st.session_state.setdefault("date_filter", DateFilter.ALL.value)
    return first_run


def _clear_filters() -> None:
    cleared = _current_filter_state().cleared()
    st.session_state["search_keyword"] = cleared.search_keyword
    st.session_state["location_filter"] = sorted(cleared.location_filter)
    st.session_state["date_filter"] = cleared.date_filter.value


def _current_filter_state() -> FilterState:
    return FilterState(
        search_keyword=st.session_state["search_keyword"],
        location_filter=frozenset(st.session_state["location_filter"]),
        date_filter=DateFilter(st.session_state["date_filter"]),
    )


def _run_refresh(feed: JobFeed) -> None:
    with st.spinner("Searching for job openings…"):
        feed.refresh_blocking()


def _render_job_card(job: Job, position: int, favorites: FavoritesStore, now) -> None:
    recency = classify_recency(job.posted_date, now)
    item_key = job_item_key(job, position)
    with st.container(border=True):
        col_a, col_b = st.columns([12, 1])
        with col_a:
            title = job.title or "Untitled"
            heading = f"### [{title}]({job.link})" if job.link else f"### {title}"
            if recency.is_new:
                heading += " :green-background[New]"
            st.markdown(heading)
            st.markdown(f"**{job.company or '—'}**")
            meta = [f"📍 {job.location or '—'}", f"📅 {recency.label}"]
            if job.display_salary:
                meta.append(f"💲 :green[{job.display_salary}]")
            st.caption(" · ".join(meta))
            if job.description:
                preview = job.description
                if len(preview) > DESCRIPTION_PREVIEW_CHARS:
                    preview = preview[:DESCRIPTION_PREVIEW_CHARS].rstrip() + "…"
                st.write(preview)
        with col_b:
            is_favorite = favorites.is_favorite(job.link)
            st.button(
                "★" if is_favorite else "☆",
                key=f"fav-{item_key}",
                on_click=favorites.toggle,
                args=(job.link,),
                help="Remove from favorites" if is_favorite else "Add to favorites",
                disabled=not job.link,
            )


def render_layout() -> None:
    """Streamlit page layout; filters and display use services layer."""
    st.set_page_config(page_title=PAGE_TITLE, layout="wide")
    first_run = _init_session()
    feed: JobFeed = st.session_state["feed"]
    favorites = _favorites_store()

    # ----- Header -----
    col_title, col_refresh = st.columns([4, 1])
    with col_title:
        st.title(PAGE_TITLE)
    with col_refresh:
        refresh_clicked = st.button(
            "Refresh Jobs",
            type="primary",
            key="refresh_btn",
            disabled=feed.state.loading,
            use_container_width=True,
        )

    # One fetch at session start; the rest are user-initiated
    if first_run or refresh_clicked:
        _run_refresh(feed)

    if feed.state.last_updated:
        st.caption(f"Last updated: {feed.state.last_updated.astimezone():%Y-%m-%d %H:%M:%S}")

    jobs: List[Job] = feed.jobs
    locations = available_locations(jobs)
    # Drop selections that no longer exist after a refresh
    st.session_state["location_filter"] = [
        loc for loc in st.session_state["location_filter"] if loc in locations
    ]

    # ----- Filter section -----
    with st.container(border=True):
        fcol1, fcol2, fcol3 = st.columns(3)
        with fcol1:
            st.text_input("Search", placeholder="Filter by keyword...", key="search_keyword")
        with fcol2:
            st.multiselect(
                "Locations",
                options=locations,
                key="location_filter",
                placeholder="Select locations",
            )
        with fcol3:
            st.radio(
                "Posted",
                options=DATE_FILTER_OPTIONS,
                format_func=lambda value: DATE_FILTER_LABELS[value],
                key="date_filter",
                horizontal=True,
            )

        state = _current_filter_state()
        now = resolve_now()
        filtered_jobs = filter_jobs(jobs, state, now)

        if state.is_active:
            scol1, scol2 = st.columns([4, 1])
            with scol1:
                st.caption(f"Showing {len(filtered_jobs)} of {len(jobs)} jobs")
            with scol2:
                st.button("Clear Filters", key="clear_filters", on_click=_clear_filters)

    if feed.state.error:
        st.error(f"Error: {feed.state.error}")

    # ----- Results -----
    if not filtered_jobs:
        st.info(
            'Click "Refresh Jobs" to load job listings'
            if not jobs
            else "Try adjusting your filters to see more results"
        )
    else:
        for position, job in enumerate(filtered_jobs):
            _render_job_card(job, position, favorites, now)

    if jobs:
        footer = f"{pluralize(len(filtered_jobs), 'job')} displayed"
        if len(favorites):
            footer += f" · {pluralize(len(favorites), 'favorite')} saved"
        st.caption(footer)


if __name__ == "__main__":
    render_layout()
