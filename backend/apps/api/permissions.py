from rest_framework.permissions import SAFE_METHODS, BasePermission


class IsStaffOrReadOnly(BasePermission):
    """Anyone may read; writes require an authenticated staff account."""

    message = "Only staff accounts may modify the catalog"

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return bool(getattr(user, "is_staff", False) or getattr(user, "is_superuser", False))
