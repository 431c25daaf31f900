from key_bindings import HINTS


def render_status(context, width):
    """
    context keys: section_title, section_index, section_total, row_index, row_total,
                  row_name
    """
    total = context.get('section_total', 0)
    title = context.get('section_title')
    if total == 0:
        where = "no sections"
    elif title is None:
        where = f"no section selected ({total})"
    else:
        idx = context.get('section_index', 0)
        row_total = context.get('row_total', 0)
        row_index = context.get('row_index')
        if row_total == 0:
            row_info = "empty"
        elif row_index is None:
            row_info = f"row -/{row_total}"
        else:
            row_info = f"row {row_index + 1}/{row_total}"
            if context.get('row_name'):
                row_info = f"{row_info} {context['row_name']}"
        where = f"{title} {idx + 1}/{total} | {row_info}"
    text = f" NAVIPOD | {where} | {HINTS}"

    return text.ljust(width)[:width]


def status_context(store, outer_selected):
    context = {'section_total': len(store)}
    if outer_selected is None or not (0 <= outer_selected < len(store)):
        return context
    section = store.get(outer_selected)
    context.update(
        section_title=section.title,
        section_index=outer_selected,
        row_index=section.inner_selected,
        row_total=len(section.rows),
    )
    row = section.selected_row
    if row is not None:
        context['row_name'] = row.name
    return context
