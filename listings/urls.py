# listings/urls.py
from django.urls import path

from . import views

urlpatterns = [
    path("healthz/", views.healthz, name="healthz"),
    path("listings/new/", views.property_create, name="property_create"),
    path("api/categories/", views.api_categories, name="api_categories"),
    path(
        "api/categories/<str:property_type>/subcategories/",
        views.api_subcategories,
        name="api_subcategories",
    ),
    path("<slug:page>/", views.category_page, name="category_page"),
]
