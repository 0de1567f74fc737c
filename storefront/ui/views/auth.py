# storefront/ui/views/auth.py

"""Login and Register views."""

from textual.app import ComposeResult
from textual.message import Message
from textual.widgets import Button, Input, Static

from storefront.services.auth_forms import LoginForm, RegisterForm
from storefront.ui.views.base import StorefrontView, ViewContext


class LoginView(StorefrontView):
    """Credential form; a successful login is announced to the shell."""

    class LoggedIn(Message):
        """Posted with the freshly issued bearer token."""

        def __init__(self, token: str) -> None:
            super().__init__()
            self.token = token

    def __init__(self, context: ViewContext) -> None:
        super().__init__(context)
        self.form = LoginForm(context.api)

    def compose(self) -> ComposeResult:
        yield Static("Masuk", classes="page-title")
        yield Static("", id="login_error", classes="error")
        yield Input(placeholder="Email", id="login_email")
        yield Input(placeholder="Password", password=True, id="login_password")
        yield Button("Login", variant="primary", id="login_submit")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "login_submit":
            event.stop()
            self.submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "login_password":
            event.stop()
            self.submit()

    def submit(self) -> None:
        self.run_worker(
            self._submit(
                self.query_one("#login_email", Input).value.strip(),
                self.query_one("#login_password", Input).value,
            ),
            group="login",
        )

    async def _submit(self, email: str, password: str) -> None:
        error = self.query_one("#login_error", Static)
        error.update("")
        token = await self.form.submit(email, password)
        if token is None:
            error.update(self.form.error)
            return
        self.post_message(self.LoggedIn(token))


class RegisterView(StorefrontView):
    """Account creation; success leads to the login page."""

    def __init__(self, context: ViewContext) -> None:
        super().__init__(context)
        self.form = RegisterForm(context.api)

    def compose(self) -> ComposeResult:
        yield Static("Daftar", classes="page-title")
        yield Static("", id="register_error", classes="error")
        yield Input(placeholder="Nama", id="register_name")
        yield Input(placeholder="Email", id="register_email")
        yield Input(
            placeholder="Password", password=True, id="register_password",
        )
        yield Button("Daftar", variant="primary", id="register_submit")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "register_submit":
            event.stop()
            self.run_worker(self._submit(), group="register")

    async def _submit(self) -> None:
        error = self.query_one("#register_error", Static)
        error.update("")
        ok = await self.form.submit(
            self.query_one("#register_name", Input).value.strip(),
            self.query_one("#register_email", Input).value.strip(),
            self.query_one("#register_password", Input).value,
        )
        if not ok:
            error.update(self.form.error)
            return
        self.context.router.navigate("/login")
