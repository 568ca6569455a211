# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# One module per resource. Input models carry an `error_messages` mapping
# (field -> message) used by lib.validation.validate_input.
#
# These models define the "contract" between API and clients.
# =============================================================================

from .crop import CROP_CATEGORIES, CropCategory, CropInput, CropResponse
from .address import AddressInput, AddressResponse, AddressUpdate
from .product import (
    ProductCategoryInput,
    ProductCategoryResponse,
    ProductInput,
    ProductResponse,
    ProductStatus,
    ProductStatusUpdate,
    ProductUpdate,
)
from .order import (
    DeliveryStatus,
    DeliveryStatusUpdate,
    OrderCreateRequest,
    OrderInput,
    OrderItemInput,
    OrderItemResponse,
    OrderResponse,
    OrderWithItems,
    PaymentStatus,
    PaymentStatusUpdate,
)
from .farmer import AreaUnit, FarmerInput, FarmerResponse, FarmerUpdate
from .feed import (
    AgriServiceCategoryInput,
    AgriServiceCategoryResponse,
    AgriServiceCategoryUpdate,
    FeedCategory,
    FeedInput,
    FeedResponse,
)
from .market_price import (
    MarketPriceFilters,
    MarketPriceInput,
    MarketPriceListing,
    MarketPriceSearch,
    MarketPriceSummary,
    PriceTrend,
)
from .category import CategoryInput
from .agri_service import AgriServiceInput, AgriServiceSearch
from .audit import AuditLogPage, AuditLogQuery
from .user import ManagedUserCreate, RoleUpdate, UserFilters, UserRole
from .preferences import DashboardPreferences, PreferencesUpdate

__all__ = [
    # Crops
    "CROP_CATEGORIES",
    "CropCategory",
    "CropInput",
    "CropResponse",
    # Addresses
    "AddressInput",
    "AddressResponse",
    "AddressUpdate",
    # Products
    "ProductCategoryInput",
    "ProductCategoryResponse",
    "ProductInput",
    "ProductResponse",
    "ProductStatus",
    "ProductStatusUpdate",
    "ProductUpdate",
    # Orders
    "DeliveryStatus",
    "DeliveryStatusUpdate",
    "OrderCreateRequest",
    "OrderInput",
    "OrderItemInput",
    "OrderItemResponse",
    "OrderResponse",
    "OrderWithItems",
    "PaymentStatus",
    "PaymentStatusUpdate",
    # Farmers
    "AreaUnit",
    "FarmerInput",
    "FarmerResponse",
    "FarmerUpdate",
    # Feeds
    "AgriServiceCategoryInput",
    "AgriServiceCategoryResponse",
    "AgriServiceCategoryUpdate",
    "FeedCategory",
    "FeedInput",
    "FeedResponse",
    # Market prices
    "MarketPriceFilters",
    "MarketPriceInput",
    "MarketPriceListing",
    "MarketPriceSearch",
    "MarketPriceSummary",
    "PriceTrend",
    # REST resources
    "CategoryInput",
    "AgriServiceInput",
    "AgriServiceSearch",
    "AuditLogPage",
    "AuditLogQuery",
    "ManagedUserCreate",
    "RoleUpdate",
    "UserFilters",
    "UserRole",
    # Preferences
    "DashboardPreferences",
    "PreferencesUpdate",
]
