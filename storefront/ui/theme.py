import flet as ft


class FletThemeContext:
    """
    Render context that turns derived tokens into a flet page theme.

    Works without a page (the theme is still built and kept) so it can be
    driven before the window exists.
    """

    def __init__(self, page: ft.Page | None = None) -> None:
        self.page = page
        self.theme: ft.Theme | None = None
        self.background: str | None = None

    def apply_tokens(self, tokens: dict[str, str]) -> None:
        self.theme = ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=tokens["--color-primary"],
                on_primary=tokens["--color-surface"],
                secondary=tokens["--color-secondary"],
                surface=tokens["--color-surface"],
                outline=tokens["--color-border"],
            ),
            font_family=tokens["--font-sans"],
        )
        self.background = tokens["--color-background"]

        if self.page is not None:
            self.page.theme = self.theme
            self.page.bgcolor = self.background
            self.page.update()
