# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .storage_service import (
    StorageErrorKind,
    StorageService,
    UploadOutcome,
    classify_storage_error,
)
from .attachment_service import AttachmentService, AttachmentUpload
from .activity_service import ActivityService
from .crop_service import CropService
from .address_service import AddressService
from .product_service import ProductService
from .order_service import OrderService
from .farmer_service import FarmerService
from .feed_service import FeedService
from .market_price_service import MarketPriceService, filter_prices, summarize_prices
from .category_service import CategoryService
from .agri_service_service import AgriServiceService
from .audit_service import AuditService
from .user_service import UserService, filter_users
from .preferences_service import PreferencesStore

__all__ = [
    # Storage / attachments
    "StorageErrorKind",
    "StorageService",
    "UploadOutcome",
    "classify_storage_error",
    "AttachmentService",
    "AttachmentUpload",
    "ActivityService",
    # Supabase resources
    "CropService",
    "AddressService",
    "ProductService",
    "OrderService",
    "FarmerService",
    "FeedService",
    # REST resources
    "MarketPriceService",
    "filter_prices",
    "summarize_prices",
    "CategoryService",
    "AgriServiceService",
    "AuditService",
    "UserService",
    "filter_users",
    # Local settings
    "PreferencesStore",
]
