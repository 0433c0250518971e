import os
import time


def render_status(context, width):
    """
    context keys: status_msg, status_until, mode, search_buffer, file_path,
                  row, total_rows, col, total_cols, sort_header, sort_direction
    """
    now = time.time()
    if context.get('mode') == 'search_entry':
        text = f"/{context.get('search_buffer', '')}"
    elif context.get('status_msg') and now < context.get('status_until', 0):
        text = f" {context['status_msg']}"
    else:
        fname = context.get('file_path') or '<stdin>'
        if fname != '<stdin>':
            fname = os.path.basename(fname)
        total_rows = context.get('total_rows', 0)
        total_cols = context.get('total_cols', 0)
        if total_rows and total_cols:
            pos = f"row {context.get('row', 0) + 1}/{total_rows} col {context.get('col', 0) + 1}/{total_cols}"
        else:
            pos = f"empty ({total_rows}x{total_cols})"
        text = f" {fname} | {pos}"
        if context.get('sort_header') is not None:
            text += f" | sorted by {context['sort_header']} {context.get('sort_direction', '')}"

    return text.ljust(width)[:width]
