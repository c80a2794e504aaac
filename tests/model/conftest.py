"""Model types shared by the model tests."""

from bubbletree.model import Field, Node, handle, handle_type, inject, inject_type


class Leaf(Node):
    x = Field(default=0)
    label = Field(default="")


class Branch(Node):
    __fields__ = ("children", "lookup", "blob", "cache")
    __no_propagate__ = {"cache": True}

    def __init__(self, children=None, lookup=None, blob=b"", cache=None):
        self.children = children if children is not None else []
        self.lookup = lookup if lookup is not None else {}
        self.blob = blob
        self.cache = cache

    @inject
    def add(self, child):
        self.children.append(child)
        return len(self.children)

    @inject_type("insert", 1)
    def insert(self, index, child):
        self.children.insert(index, child)

    @handle
    def clear(self):
        self.children.clear()

    @handle_type("rename", 0)
    def rename(self, name):
        self.name = name

    @handle_type("touch")
    def touch(self):
        pass


class Root(Node, model_type="root"):
    child = Field(default=None)


def _chain(depth):
    """Build root -> Branch -> ... -> Leaf with depth branches, already injected."""
    leaf = Leaf()
    node = leaf
    for _ in range(depth):
        node = Branch(children=[node])
    root = Root()
    root.child = node
    root.inject()
    return root, leaf


def _record(events):
    return lambda e: events.append(e)
