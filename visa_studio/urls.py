"""
URL configuration for visa_studio project.
"""

from django.contrib import admin
from django.urls import path, include

# ======================
# URL Patterns
# ======================


urlpatterns = [
    # Django admin
    path("admin/", admin.site.urls),

    # Login/Logout for the builder pages
    path("accounts/", include('django.contrib.auth.urls')),
]

admin_urls = [
    #   VISA BUILDER URLS
    path('admin_panel/', include('visas.urls.urls')),
]
urlpatterns += admin_urls
