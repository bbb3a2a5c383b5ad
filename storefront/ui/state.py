from dataclasses import dataclass

from storefront.domain.entities import Session, User


@dataclass
class AppState:
    current_user: User | None = None
    current_session: Session | None = None

    def login(self, session: Session) -> None:
        self.current_session = session
        self.current_user = session.user

    def logout(self) -> None:
        self.current_user = None
        self.current_session = None
