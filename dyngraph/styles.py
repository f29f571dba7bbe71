from .settings import HIGHLIGHT_COLOR, LINK_COLOR, LINK_WIDTH, PALETTE


def color_for_group(group):
    return PALETTE[group % len(PALETTE)]


def link_key(source, target):
    return f"{source}-{target}"


def style_for(node, connected=frozenset()):
    """
    Fill and cursor for a node circle.

    `connected` is the set of ids currently highlighted (the clicked node and
    its neighbours); it is empty when nothing is highlighted.
    """
    fill = HIGHLIGHT_COLOR if node.id in connected else color_for_group(node.group)
    return {
        "fill": fill,
        "cursor": "pointer" if node.link else "default",
    }


def link_style_for(source, target, highlighted_id=None):
    touches = highlighted_id is not None and highlighted_id in (source, target)
    return {
        "stroke": HIGHLIGHT_COLOR if touches else LINK_COLOR,
        "strokeWidth": LINK_WIDTH,
    }
