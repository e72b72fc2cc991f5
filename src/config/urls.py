from django.urls import include, path

urlpatterns = [
    path("", include("modules.core.urls")),
    # Resource modules, versioned API
    path("api/v1/", include("modules.products.urls")),
    path("api/v1/", include("modules.accounts.urls")),
]
