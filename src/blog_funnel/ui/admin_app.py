"""Admin console for blogs, funnel configuration and analytics."""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

# Ensure src/ is on sys.path for Streamlit Cloud
_src_path = Path(__file__).resolve().parents[2]
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from blog_funnel.config.settings import get_settings
from blog_funnel.db.models import BlogStatus
from blog_funnel.db.session import get_session
from blog_funnel.errors import FunnelError
from blog_funnel.exporters import csv_export
from blog_funnel.providers.generator import GeneratorClient
from blog_funnel.services import admin, analytics_service, cascade
from blog_funnel.services.generation_service import GenerationService
from blog_funnel.services.wizard import FunnelAssembler, WizardState, WizardStep, slugify
from blog_funnel.utils.log import configure_logging

LOGO_POSITIONS = ["top-center", "top-left", "top-right"]


def _find_project_root() -> Path | None:
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    return None


def _generation() -> GenerationService:
    return GenerationService(GeneratorClient(get_settings()))


def _wizard() -> WizardState:
    if "wizard" not in st.session_state:
        st.session_state["wizard"] = WizardState()
    return st.session_state["wizard"]


def _category_names() -> dict[int, str]:
    with get_session() as session:
        return {c.id: c.name for c in admin.list_categories(session)}


# wizard


def _wizard_blog_step(state: WizardState, categories: dict[int, str]) -> None:
    draft = state.blog
    draft.title = st.text_input("Title", value=draft.title)
    ids = list(categories)
    index = ids.index(draft.category_id) if draft.category_id in ids else None
    draft.category_id = st.selectbox(
        "Category", ids, index=index, format_func=lambda cid: categories[cid]
    )
    draft.author = st.text_input("Author", value=draft.author)
    category_name = categories.get(draft.category_id) if draft.category_id else None

    cols = st.columns(2)
    if cols[0].button("Generate content"):
        try:
            with st.spinner("Generating content..."):
                generated = _generation().generate_content(draft.title, category_name)
            draft.content = generated.content
            draft.featured_image = generated.image_url or draft.featured_image
            state.set_candidates(generated.related_searches)
            note = f" ({generated.padded} placeholders added)" if generated.padded else ""
            st.success(f"Generated content and {len(generated.related_searches)} related searches{note}")
        except FunnelError as exc:
            st.error(f"Failed to generate content: {exc}")
    if cols[1].button("Generate image"):
        try:
            with st.spinner("Generating image..."):
                image = _generation().generate_image(draft.title, category_name)
            if image:
                draft.featured_image = image
                st.success("Image generated!")
        except FunnelError as exc:
            st.error(f"Failed to generate image: {exc}")

    draft.content = st.text_area("Content", value=draft.content, height=240)
    draft.featured_image = st.text_input("Featured image URL", value=draft.featured_image)
    if draft.featured_image:
        st.image(draft.featured_image, width=320)
    draft.slug = st.text_input("Slug", value=draft.slug or slugify(draft.title))


def _wizard_search_step(state: WizardState) -> None:
    if not state.candidates:
        st.info("Generate content first to get related search suggestions.")
        return
    st.write(f"Select 4 related searches ({len(state.searches)}/4). Selection order sets WR-1..WR-4.")
    for index, text in enumerate(state.candidates):
        rank = state.searches.rank(index)
        cols = st.columns([1, 6, 1])
        label = f"WR-{rank}" if rank else "Select"
        if cols[0].button(label, key=f"pick_search_{index}"):
            if not state.toggle_search(index):
                st.warning("Only 4 related searches can be selected")
            st.rerun()
        edited = cols[1].text_input("Search", value=text, key=f"edit_search_{index}", label_visibility="collapsed")
        if edited != text and cols[2].button("Save", key=f"save_search_{index}"):
            try:
                state.edit_candidate(index, edited)
            except FunnelError as exc:
                st.error(str(exc))


def _wizard_results_step(state: WizardState, category_name: str | None) -> None:
    for wr, index, text in state.selected_searches():
        st.markdown(f"**WR-{wr}: {text}**")
        if st.button("Generate web results", key=f"gen_results_{index}"):
            try:
                with st.spinner("Generating web results..."):
                    state.set_web_results(index, _generation().generate_web_results(text, category_name))
            except FunnelError as exc:
                st.error(f"Failed to generate web results: {exc}")
        selection = state.result_selection(index)
        for result_index, result in enumerate(state.web_results.get(index, [])):
            rank = selection.rank(result_index)
            cols = st.columns([1, 5, 2])
            if cols[0].button(f"#{rank}" if rank else "Select", key=f"pick_result_{index}_{result_index}"):
                if not state.toggle_web_result(index, result_index):
                    st.warning("Only 4 web results can be selected")
                st.rerun()
            cols[1].write(f"**{result['title']}**  \n{result['url']}  \n{result.get('description') or ''}")
            sponsored = cols[2].checkbox(
                "Sponsored",
                value=bool(result.get("is_sponsored")),
                key=f"sponsored_{index}_{result_index}",
            )
            if sponsored != bool(result.get("is_sponsored")):
                state.edit_web_result(index, result_index, is_sponsored=sponsored)
        st.divider()


def _wizard_pre_landing_step(state: WizardState, category_name: str | None) -> None:
    for wr, index, text in state.selected_searches():
        primary = state.primary_web_result(index)
        st.markdown(f"**WR-{wr}: {text}**")
        if primary is None:
            st.caption("No web result selected")
            continue
        st.caption(f"For: {primary['title']}")
        if st.button("Generate pre-landing", key=f"gen_pl_{index}"):
            try:
                with st.spinner("Generating pre-landing..."):
                    state.set_pre_landing(
                        index, _generation().generate_pre_landing(primary["title"], category_name)
                    )
            except FunnelError as exc:
                st.error(f"Failed to generate pre-landing: {exc}")
        config = state.pre_landing.get(index)
        if config:
            config["headline"] = st.text_input("Headline", value=config.get("headline", ""), key=f"pl_h_{index}")
            config["description"] = st.text_area(
                "Description", value=config.get("description", ""), key=f"pl_d_{index}"
            )
            config["button_text"] = st.text_input(
                "Button text", value=config.get("button_text", "Visit Now"), key=f"pl_b_{index}"
            )
            config["destination_url"] = st.text_input(
                "Destination URL", value=config.get("destination_url") or primary["url"], key=f"pl_u_{index}"
            )
        st.divider()


def _wizard_review_step(state: WizardState, categories: dict[int, str]) -> None:
    draft = state.blog
    st.markdown(f"**{draft.title}** • {categories.get(draft.category_id, '—')} • {draft.author}")
    rows = []
    for wr, index, text in state.selected_searches():
        results = state.web_results.get(index, [])
        for position, result_index in enumerate(state.result_selection(index).items, start=1):
            rows.append(
                {
                    "WR": wr,
                    "Search": text,
                    "Result #": position,
                    "Title": results[result_index]["title"],
                    "Sponsored": bool(results[result_index].get("is_sponsored")),
                    "Pre-landing": index in state.pre_landing,
                }
            )
    st.dataframe(pd.DataFrame(rows), width="stretch")
    if st.button("Save all", type="primary"):
        try:
            with get_session() as session:
                blog = FunnelAssembler().save(session, state)
                title = blog.title
            st.success(f"Blog '{title}' with all related content created successfully!")
            st.session_state.pop("wizard", None)
        except FunnelError as exc:
            st.error(f"Failed to save. Please try again. {exc}")


def _wizard_block(categories: dict[int, str]) -> None:
    state = _wizard()
    steps = list(WizardStep)
    st.caption(" → ".join(f"**{s.value}**" if s is state.step else s.value for s in steps))
    category_name = categories.get(state.blog.category_id) if state.blog.category_id else None

    if state.step is WizardStep.blog:
        _wizard_blog_step(state, categories)
    elif state.step is WizardStep.related_searches:
        _wizard_search_step(state)
    elif state.step is WizardStep.web_results:
        _wizard_results_step(state, category_name)
    elif state.step is WizardStep.pre_landing:
        _wizard_pre_landing_step(state, category_name)
    else:
        _wizard_review_step(state, categories)

    cols = st.columns(3)
    if state.step is not WizardStep.blog and cols[0].button("Back"):
        state.back()
        st.rerun()
    if state.step is not WizardStep.review and cols[1].button("Next"):
        try:
            state.advance()
            st.rerun()
        except FunnelError as exc:
            st.error(str(exc))
    if cols[2].button("Cancel wizard"):
        st.session_state.pop("wizard", None)
        st.rerun()


# tabs


def _blogs_tab() -> None:
    categories = _category_names()
    with st.expander("Create blog with wizard", expanded="wizard" in st.session_state):
        _wizard_block(categories)

    try:
        with get_session() as session:
            blogs = admin.list_blogs(session)
    except Exception as exc:  # noqa: BLE001
        st.error(f"Failed to load blogs: {exc}")
        return

    if not blogs:
        st.info("No blogs yet.")
        return

    table = [
        {
            "ID": str(b.id),
            "Title": b.title,
            "Slug": b.slug,
            "Category": categories.get(b.category_id, "—"),
            "Author": b.author,
            "Status": b.status.value if b.status else "—",
            "Published": b.published_at,
        }
        for b in blogs
    ]
    st.dataframe(pd.DataFrame(table), width="stretch")

    options = {f"{b.title} • {b.slug}": b.id for b in blogs}
    selected = st.multiselect("Select blogs", list(options))
    selected_ids = [options[label] for label in selected]
    chosen = [b for b in blogs if b.id in selected_ids]

    cols = st.columns(6)
    cols[0].download_button("Export all CSV", csv_export.blogs_csv(blogs), "all-blogs.csv", "text/csv")
    cols[1].download_button(
        "Export selected", csv_export.blogs_csv(chosen), "selected-blogs.csv", "text/csv", disabled=not chosen
    )
    if cols[2].button("Activate", disabled=not chosen):
        with get_session() as session:
            count = admin.set_blog_status(session, selected_ids, BlogStatus.published)
        st.success(f"Activated {count} blogs")
    if cols[3].button("Deactivate", disabled=not chosen):
        with get_session() as session:
            count = admin.set_blog_status(session, selected_ids, BlogStatus.draft)
        st.success(f"Deactivated {count} blogs")
    if cols[4].button("Copy links", disabled=not chosen):
        with get_session() as session:
            links = admin.blog_links(session, selected_ids, get_settings().site_base_url)
        st.code("\n".join(links))
    if cols[5].button("Delete selected", disabled=not chosen):
        with get_session() as session:
            result = cascade.delete_blogs(session, selected_ids)
        st.success(f"Deleted {len(result.succeeded)} blogs")
        for blog_id, error in result.failed.items():
            st.error(f"Failed to delete {blog_id}: {error}")

    st.divider()
    st.write("Edit blog")
    labels = {f"{b.title} • {b.slug}": b for b in blogs}
    label = st.selectbox("Blog", list(labels), key="edit_blog")
    blog = labels[label]
    with st.form("blog_edit"):
        title = st.text_input("Title", value=blog.title)
        slug = st.text_input("Slug", value=blog.slug)
        ids = list(categories)
        category_id = st.selectbox(
            "Category",
            ids,
            index=ids.index(blog.category_id) if blog.category_id in ids else None,
            format_func=lambda cid: categories[cid],
        )
        author = st.text_input("Author", value=blog.author)
        content = st.text_area("Content", value=blog.content, height=200)
        featured_image = st.text_input("Featured image URL", value=blog.featured_image or "")
        status = st.selectbox(
            "Status", [s.value for s in BlogStatus], index=[s.value for s in BlogStatus].index(blog.status.value)
        )
        submitted = st.form_submit_button("Save")
    if submitted:
        try:
            with get_session() as session:
                admin.save_blog(
                    session,
                    {
                        "title": title,
                        "slug": slug,
                        "category_id": category_id,
                        "author": author,
                        "content": content,
                        "featured_image": featured_image,
                        "status": status,
                    },
                    blog_id=blog.id,
                )
            st.success("Blog updated")
        except FunnelError as exc:
            st.error(f"Failed to save blog: {exc}")
    if st.button("Delete this blog"):
        try:
            with get_session() as session:
                cascade.delete_blog(session, blog.id)
            st.success("Blog deleted successfully")
        except Exception as exc:  # noqa: BLE001
            st.error(f"Failed to delete blog: {exc}")


def _categories_tab() -> None:
    try:
        with get_session() as session:
            categories = admin.list_categories(session)
    except Exception as exc:  # noqa: BLE001
        st.error(f"Failed to load categories: {exc}")
        return

    if categories:
        st.dataframe(
            pd.DataFrame([{"ID": c.id, "Name": c.name, "Code Range": c.code_range} for c in categories]),
            width="stretch",
        )
    else:
        st.info("No categories yet.")

    options = {"New category": None} | {f"{c.id} • {c.name}": c for c in categories}
    choice = st.selectbox("Category", list(options), key="edit_category")
    current = options[choice]
    with st.form("category_form"):
        name = st.text_input("Name", value=current.name if current else "")
        code_range = st.text_input("Code range", value=current.code_range if current else "")
        submitted = st.form_submit_button("Save")
    if submitted:
        try:
            with get_session() as session:
                admin.save_category(
                    session, {"name": name, "code_range": code_range}, current.id if current else None
                )
            st.success("Category saved")
        except FunnelError as exc:
            st.error(f"Failed to save category: {exc}")
    if current and st.button("Delete category"):
        try:
            with get_session() as session:
                admin.delete_category(session, current.id)
            st.success("Category deleted successfully")
        except FunnelError as exc:
            st.error(f"Failed to delete category: {exc}")


def _searches_tab() -> None:
    try:
        with get_session() as session:
            searches = admin.list_related_searches(session)
            blogs = admin.list_blogs(session)
    except Exception as exc:  # noqa: BLE001
        st.error(f"Failed to load related searches: {exc}")
        return

    if searches:
        st.dataframe(
            pd.DataFrame(
                [
                    {
                        "ID": str(s.id),
                        "Blog": title or "—",
                        "Search": s.search_text,
                        "WR": s.wr,
                        "Order": s.order_index,
                    }
                    for s, title in searches
                ]
            ),
            width="stretch",
        )
        st.download_button(
            "Export CSV", csv_export.related_searches_csv(searches), "related-searches.csv", "text/csv"
        )
    else:
        st.info("No related searches yet.")

    blog_options = {b.title: b.id for b in blogs}
    options = {"New related search": None} | {f"{s.search_text} • WR-{s.wr}": s for s, _ in searches}
    choice = st.selectbox("Related search", list(options), key="edit_search")
    current = options[choice]
    with st.form("search_form"):
        blog_titles = list(blog_options)
        current_blog = next((t for t, bid in blog_options.items() if current and bid == current.blog_id), None)
        blog_title = st.selectbox(
            "Blog", blog_titles, index=blog_titles.index(current_blog) if current_blog else None
        )
        text = st.text_input("Search text", value=current.search_text if current else "")
        wr = st.number_input("WR", min_value=1, max_value=4, value=int(current.wr or 1) if current else 1)
        order = st.number_input("Order", min_value=0, value=int(current.order_index or 0) if current else 0)
        submitted = st.form_submit_button("Save")
    if submitted:
        try:
            with get_session() as session:
                admin.save_related_search(
                    session,
                    {
                        "blog_id": blog_options.get(blog_title),
                        "search_text": text,
                        "wr": int(wr),
                        "order_index": int(order),
                    },
                    current.id if current else None,
                )
            st.success("Search saved")
        except FunnelError as exc:
            st.error(f"Failed to save search: {exc}")

    selected = st.multiselect("Delete searches", [k for k in options if options[k]])
    if st.button("Delete selected searches", disabled=not selected):
        with get_session() as session:
            result = cascade.delete_related_searches(session, [options[k].id for k in selected])
        st.success(f"Deleted {len(result.succeeded)} searches")
        for search_id, error in result.failed.items():
            st.error(f"Failed to delete {search_id}: {error}")


def _web_results_tab() -> None:
    try:
        with get_session() as session:
            searches = admin.list_related_searches(session)
            results = admin.list_web_results(session)
    except Exception as exc:  # noqa: BLE001
        st.error(f"Failed to load web results: {exc}")
        return

    search_text = {s.id: s.search_text for s, _ in searches}
    search_labels = {f"{s.search_text} • WR-{s.wr} • {title or '—'}": s.id for s, title in searches}

    if results:
        st.dataframe(
            pd.DataFrame(
                [
                    {
                        "ID": str(r.id),
                        "Related Search": search_text.get(r.related_search_id, "—"),
                        "Title": r.title,
                        "URL": r.url,
                        "Sponsored": r.is_sponsored,
                        "Order": r.order_index,
                    }
                    for r in results
                ]
            ),
            width="stretch",
        )
    else:
        st.info("No web results yet.")

    options = {"New web result": None} | {f"{r.title} • {r.url}": r for r in results}
    selected = st.multiselect("Select results", [k for k in options if options[k]])
    chosen = [options[k] for k in selected]
    chosen_ids = [r.id for r in chosen]
    cols = st.columns(6)
    cols[0].download_button(
        "Export all CSV", csv_export.web_results_csv(results, search_text), "all-web-results.csv", "text/csv"
    )
    cols[1].download_button(
        "Export selected",
        csv_export.web_results_csv(chosen, search_text),
        "selected-web-results.csv",
        "text/csv",
        disabled=not chosen,
    )
    for col, label, flag in ((cols[2], "Mark sponsored", True), (cols[3], "Remove sponsored", False)):
        if col.button(label, disabled=not chosen):
            try:
                with get_session() as session:
                    count = admin.set_sponsored(session, chosen_ids, flag)
                st.success(f"Updated {count} results")
            except FunnelError as exc:
                st.error(f"Failed to update results: {exc}")
    if cols[4].button("Copy URLs", disabled=not chosen):
        with get_session() as session:
            urls = admin.web_result_urls(session, chosen_ids)
        st.code("\n".join(urls))
    if cols[5].button("Delete selected results", disabled=not chosen):
        with get_session() as session:
            count = admin.delete_web_results(session, chosen_ids)
        st.success(f"Deleted {count} results")

    choice = st.selectbox("Web result", list(options), key="edit_result")
    current = options[choice]
    with st.form("result_form"):
        labels = list(search_labels)
        current_label = next(
            (k for k, sid in search_labels.items() if current and sid == current.related_search_id), None
        )
        search_label = st.selectbox(
            "Related search", labels, index=labels.index(current_label) if current_label else None
        )
        title = st.text_input("Title", value=current.title if current else "")
        url = st.text_input("URL", value=current.url if current else "")
        description = st.text_area("Description", value=(current.description or "") if current else "")
        logo_url = st.text_input("Logo URL", value=(current.logo_url or "") if current else "")
        order = st.number_input("Order", min_value=0, value=int(current.order_index or 0) if current else 0)
        sponsored = st.checkbox("Sponsored", value=bool(current.is_sponsored) if current else False)
        submitted = st.form_submit_button("Save")
    if submitted:
        try:
            with get_session() as session:
                admin.save_web_result(
                    session,
                    {
                        "related_search_id": search_labels.get(search_label),
                        "title": title,
                        "url": url,
                        "description": description,
                        "logo_url": logo_url,
                        "order_index": int(order),
                        "is_sponsored": sponsored,
                    },
                    current.id if current else None,
                )
            st.success("Result saved")
        except FunnelError as exc:
            st.error(f"Failed to save result: {exc}")


def _pre_landing_tab() -> None:
    try:
        with get_session() as session:
            configs = admin.list_pre_landing(session)
            searches = admin.list_related_searches(session)
    except Exception as exc:  # noqa: BLE001
        st.error(f"Failed to load pre-landing pages: {exc}")
        return

    if configs:
        st.dataframe(
            pd.DataFrame(
                [
                    {
                        "ID": str(c.id),
                        "Related Search": text or "—",
                        "Headline": c.headline,
                        "Button": c.button_text,
                        "Destination": c.destination_url,
                    }
                    for c, text in configs
                ]
            ),
            width="stretch",
        )
        st.download_button("Export CSV", csv_export.pre_landing_csv(configs), "pre-landing.csv", "text/csv")
    else:
        st.info("No pre-landing pages yet.")

    search_labels = {f"{s.search_text} • WR-{s.wr}": s.id for s, _ in searches}
    options = {"New pre-landing": None} | {f"{text or '—'} • {c.headline or ''}": c for c, text in configs}
    choice = st.selectbox("Pre-landing", list(options), key="edit_pl")
    current = options[choice]
    with st.form("pl_form"):
        labels = list(search_labels)
        current_label = next(
            (k for k, sid in search_labels.items() if current and sid == current.related_search_id), None
        )
        search_label = st.selectbox(
            "Related search", labels, index=labels.index(current_label) if current_label else None
        )
        values = {
            "logo_url": st.text_input("Logo URL", value=(current.logo_url or "") if current else ""),
            "logo_position": st.selectbox(
                "Logo position",
                LOGO_POSITIONS,
                index=LOGO_POSITIONS.index(current.logo_position)
                if current and current.logo_position in LOGO_POSITIONS
                else 0,
            ),
            "main_image_url": st.text_input(
                "Main image URL", value=(current.main_image_url or "") if current else ""
            ),
            "headline": st.text_input("Headline", value=(current.headline or "") if current else ""),
            "description": st.text_area("Description", value=(current.description or "") if current else ""),
            "background_color": st.color_picker(
                "Background color", value=current.background_color if current else "#ffffff"
            ),
            "background_image_url": st.text_input(
                "Background image URL", value=(current.background_image_url or "") if current else ""
            ),
            "button_text": st.text_input("Button text", value=current.button_text if current else "Visit Now"),
            "destination_url": st.text_input(
                "Destination URL", value=(current.destination_url or "") if current else ""
            ),
        }
        submitted = st.form_submit_button("Save")
    if submitted:
        values["related_search_id"] = search_labels.get(search_label)
        try:
            with get_session() as session:
                admin.save_pre_landing(session, values, current.id if current else None)
            st.success("Config saved")
        except FunnelError as exc:
            st.error(f"Failed to save config: {exc}")
    if current and st.button("Delete pre-landing"):
        try:
            with get_session() as session:
                admin.delete_pre_landing(session, current.id)
            st.success("Config deleted")
        except FunnelError as exc:
            st.error(f"Failed to delete config: {exc}")


def _analytics_tab() -> None:
    try:
        with get_session() as session:
            sessions = analytics_service.session_summaries(session)
            blog_clicks = analytics_service.blog_click_breakdown(session)
            search_clicks = analytics_service.related_search_breakdown(session)
            emails = analytics_service.email_submissions(session)
    except Exception as exc:  # noqa: BLE001
        st.error(f"Failed to load analytics: {exc}")
        return

    st.subheader("Sessions")
    if sessions:
        st.dataframe(
            pd.DataFrame(
                [
                    {
                        "Session": s.session_id,
                        "IP": s.ip_address,
                        "Country": s.country,
                        "Source": s.source,
                        "Device": s.device_type,
                        "Page Views": s.page_views,
                        "Related Searches": s.related_searches,
                        "Blog Clicks": s.blog_clicks,
                    }
                    for s in sessions
                ]
            ),
            width="stretch",
        )
        st.download_button("Export sessions CSV", csv_export.sessions_csv(sessions), "sessions.csv", "text/csv")
    else:
        st.info("No events yet.")

    with st.expander("View breakdown"):
        cols = st.columns(2)
        with cols[0]:
            st.write("Blog clicks")
            if blog_clicks:
                st.dataframe(
                    pd.DataFrame(
                        [{"Blog": b.label, "Total": b.total_clicks, "Unique": b.unique_clicks} for b in blog_clicks]
                    ),
                    width="stretch",
                )
            else:
                st.caption("No blog clicks yet")
        with cols[1]:
            st.write("Related search clicks")
            if search_clicks:
                st.dataframe(
                    pd.DataFrame(
                        [
                            {
                                "Search": s.label,
                                "Blog": s.parent_label,
                                "Total": s.total_clicks,
                                "Unique": s.unique_clicks,
                            }
                            for s in search_clicks
                        ]
                    ),
                    width="stretch",
                )
            else:
                st.caption("No related search clicks yet")

    st.subheader("Email submissions")
    if emails:
        st.dataframe(
            pd.DataFrame(
                [
                    {
                        "Email": row.email,
                        "Related Search": text or "—",
                        "Session": row.session_id,
                        "IP": row.ip_address,
                        "Submitted": row.created_at,
                    }
                    for row, text in emails
                ]
            ),
            width="stretch",
        )
        st.download_button(
            "Export emails CSV", csv_export.email_submissions_csv(emails), "email-submissions.csv", "text/csv"
        )
    else:
        st.info("No email submissions yet.")


def main() -> None:
    root = _find_project_root()
    if root is not None:
        load_dotenv(root / ".env")
    configure_logging(get_settings().log_level)

    st.set_page_config(page_title="Blog Funnel Admin", layout="wide")
    st.title("Blog Funnel Admin")
    if not get_settings().database_url:
        st.warning("DATABASE_URL is not set. Add it to .env to connect the admin console.")
        return

    tabs = st.tabs(["Blogs", "Categories", "Related Searches", "Web Results", "Pre-Landing", "Analytics"])
    with tabs[0]:
        _blogs_tab()
    with tabs[1]:
        _categories_tab()
    with tabs[2]:
        _searches_tab()
    with tabs[3]:
        _web_results_tab()
    with tabs[4]:
        _pre_landing_tab()
    with tabs[5]:
        _analytics_tab()


if __name__ == "__main__":
    main()
