"""
Permission classes for store-based access control.
"""

from rest_framework import permissions


class HasStoreAccess(permissions.BasePermission):
    """
    Permission class to ensure users can only access resources from their own store.

    Objects owned by another store are refused with 403 rather than hidden,
    so views look objects up across all stores and let this check decide.
    """

    message = "You do not have access to this store's data."

    def has_permission(self, request, view):
        # Check if user is authenticated and owns a store
        return bool(
            request.user and request.user.is_authenticated and request.user.has_store_access()
        )

    def has_object_permission(self, request, view, obj):
        # Check if the object belongs to the user's store
        if hasattr(obj, "store_id"):
            return obj.store_id == request.user.store_id
        return True
