from scrollsnap.widgets.page_layout import PageLayout


class FakePage:
    def __init__(self):
        self.size = None
        self.offset = None
        self.pivot = None

    def set_page_size(self, width, height):
        self.size = (width, height)

    def set_anchored_offset(self, x, y):
        self.offset = (x, y)

    def set_pivot(self, x, y):
        self.pivot = (x, y)


class FakeContainer:
    def __init__(self, width=300, height=200):
        self._size = (width, height)
        self.extent = None

    def viewport_size(self):
        return self._size

    def set_content_extent(self, extent):
        self.extent = extent


def test_pages_are_placed_one_step_apart():
    rects = PageLayout().layout(300, 200, 5, 1)
    assert [r.index for r in rects] == [0, 1, 2, 3, 4]
    assert [r.offset for r in rects] == [0, 300, 600, 900, 1200]
    assert all(r.rect.width() == 300 and r.rect.height() == 200 for r in rects)


def test_step_factor_multiplies_spacing():
    rects = PageLayout().layout(300, 200, 3, 2)
    assert [r.offset for r in rects] == [0, 600, 1200]


def test_zero_step_falls_back_to_three():
    rects = PageLayout().layout(100, 50, 3, 0)
    assert [r.offset for r in rects] == [0, 300, 600]


def test_layout_is_idempotent():
    layout = PageLayout()
    first = [r.rect for r in layout.layout(320, 240, 4, 1.5)]
    second = [r.rect for r in layout.layout(320, 240, 4, 1.5)]
    assert first == second


def test_changed_page_count_recomputes_from_scratch():
    layout = PageLayout()
    layout.layout(300, 200, 5, 1)
    rects = layout.layout(300, 200, 2, 1)
    assert [r.offset for r in rects] == [0, 300]


def test_no_pages_gives_empty_layout_and_zero_extent():
    rects = PageLayout().layout(300, 200, 0, 1)
    assert rects == []
    assert PageLayout.content_extent(rects) == 0.0


def test_apply_writes_page_geometry_and_content_extent():
    pages = [FakePage() for _ in range(3)]
    container = FakeContainer(width=300, height=200)

    rects = PageLayout().apply(pages, container, 1)

    assert len(rects) == 3
    assert [p.offset for p in pages] == [(0, 0.0), (300, 0.0), (600, 0.0)]
    assert all(p.size == (300, 200) for p in pages)
    assert all(p.pivot == (0.0, 0.0) for p in pages)
    assert container.extent == 600
