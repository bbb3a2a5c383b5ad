from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---
RoleType = Literal["admin", "staff"]
OrderStatus = Literal["Pending", "Shipped", "Delivered", "Cancelled"]
NavbarLayout = Literal["left", "center"]

ORDER_STATUSES: tuple[str, ...] = ("Pending", "Shipped", "Delivered", "Cancelled")

# Identity key of a cart line: (product id, selected size, selected color)
CartKey = tuple[str, str, str]


class StoreModel(BaseModel):
    """Base for every record that crosses the wire (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


# --- Catalog ---

class Product(StoreModel):
    id: str = ""
    name: str
    description: str = ""
    price: float = Field(ge=0)
    discount_price: float | None = Field(default=None, ge=0)
    category: str = ""
    images: list[str] = Field(default_factory=list)
    sizes: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    new_arrival: bool = False
    best_seller: bool = False
    stock: int = 0
    likes: int = Field(default=0, ge=0)

    @property
    def effective_price(self) -> float:
        # A discount of 0 is treated as "no discount", matching the storefront pages
        if self.discount_price:
            return self.discount_price
        return self.price


class Category(StoreModel):
    id: str = ""
    name: str
    image: str = ""


# --- Cart & Orders ---

class CartItem(Product):
    selected_size: str
    selected_color: str
    quantity: int = Field(default=1, ge=1)

    @property
    def key(self) -> CartKey:
        return (self.id, self.selected_size, self.selected_color)

    @property
    def line_total(self) -> float:
        return self.effective_price * self.quantity


class ShippingAddress(StoreModel):
    name: str
    email: str
    address: str = ""
    city: str = ""
    zip: str = ""


class Order(StoreModel):
    id: str = ""
    customer_name: str
    email: str
    shipping_address: ShippingAddress
    items: list[CartItem] = Field(default_factory=list)
    total: float = 0.0
    status: OrderStatus = "Pending"
    date: str = ""


# --- Users ---

class User(StoreModel):
    id: str = ""
    username: str
    role: RoleType = "staff"
    permissions: list[str] = Field(default_factory=list)


class Session(StoreModel):
    user: User
    access_token: str


# --- Site configuration ---

class ThemeColors(StoreModel):
    background: str = "#F9F8F6"
    surface: str = "#FFFFFF"
    border: str = "#E5E0D8"
    primary: str = "#2C251F"
    secondary: str = "#D5CDC0"


class FooterColors(StoreModel):
    background: str = "#2C251F"
    text: str = "#F5F5F5"
    border: str = "#3D342C"


class LayoutSection(StoreModel):
    id: str
    type: str
    is_visible: bool = True
    data: dict[str, Any] = Field(default_factory=dict)
    # Position is implicitly defined by list order in SiteConfig.home_layout


class SiteConfig(StoreModel):
    # Brand
    site_name: str | None = None
    logo: str | None = None

    # Developer settings
    theme_colors: ThemeColors = Field(default_factory=ThemeColors)
    footer_colors: FooterColors = Field(default_factory=FooterColors)
    navbar_layout: NavbarLayout = "center"
    border_radius: str = "2px"
    font_sans: str = "Inter"
    font_serif: str = "Cormorant Garamond"
    home_layout: list[LayoutSection] = Field(default_factory=list)

    # Announcement bar
    announcement_enabled: bool = False
    announcement_text: str | None = None
    announcement_link: str | None = None
    announcement_bg_color: str | None = None
    announcement_text_color: str | None = None

    # Hero
    hero_image: str | None = None
    hero_video: str | None = None
    hero_tagline: str | None = None
    hero_title: str | None = None
    hero_subtitle: str | None = None

    # Section headers
    category_title: str | None = None
    featured_title: str | None = None
    featured_subtitle: str | None = None

    # Promo banner
    promo_title: str | None = None
    promo_text: str | None = None
    promo_image: str | None = None
    promo_button_text: str | None = None
    promo_button_link: str | None = None

    # Content
    about_title: str | None = None
    about_content: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    contact_address: str | None = None

    # Socials
    social_instagram: str | None = None
    social_facebook: str | None = None
    social_whatsapp: str | None = None

    # Trust badges
    trust_badge1_title: str | None = None
    trust_badge1_text: str | None = None
    trust_badge2_title: str | None = None
    trust_badge2_text: str | None = None
    trust_badge3_title: str | None = None
    trust_badge3_text: str | None = None

    currency: str = "$"
