from .permissions import is_admin


def admin_state(request):
    """Expose the admin flag to all templates for the navbar."""
    return {"mmi_admin": is_admin(request)}
