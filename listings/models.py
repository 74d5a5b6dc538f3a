# listings/models.py
import random

from django.db import models
from django.utils import timezone

from .categories import (
    PROPERTY_TYPE_CHOICES,
    get_category_page_for_property_type,
    get_property_type_display_name,
    get_subcategory_label,
    should_display_property_on_page,
)


def gen_external_id():
    """
    Candidate external ID; Property.save() retries until it is unused.
    """
    ts = timezone.now().strftime("%Y%m%d%H%M%S")
    return f"PL{ts}{random.randint(100, 999)}"


class Property(models.Model):
    external_id = models.CharField(
        "External ID",
        max_length=100,
        unique=True,
        blank=True,
    )
    title = models.CharField("Title", max_length=120, blank=True)
    description = models.TextField("Description", blank=True)

    property_type = models.CharField(
        "Property type",
        max_length=20,
        choices=PROPERTY_TYPE_CHOICES,
    )
    # Slug from PROPERTY_SUBCATEGORIES; validated against property_type in the form.
    subcategory = models.CharField("Subcategory", max_length=40, blank=True)

    price = models.DecimalField(
        "Price", max_digits=14, decimal_places=2, null=True, blank=True
    )
    address = models.CharField("Address", max_length=255, blank=True)
    is_archived = models.BooleanField("Archived", default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-updated_at", "-id"]

    def __str__(self):
        return self.title or self.external_id

    def save(self, *args, **kwargs):
        if not getattr(self, "external_id", None):
            for _ in range(6):
                candidate = gen_external_id()
                if not type(self).objects.filter(external_id=candidate).exists():
                    self.external_id = candidate
                    break
            else:
                raise ValueError("Could not generate a unique external_id")
        super().save(*args, **kwargs)

    @property
    def category_page(self) -> str:
        return get_category_page_for_property_type(self.property_type)

    @property
    def property_type_display(self) -> str:
        return get_property_type_display_name(self.property_type)

    @property
    def subcategory_label(self) -> str:
        if not self.subcategory:
            return ""
        return get_subcategory_label(self.property_type, self.subcategory)

    def is_displayed_on(self, page: str) -> bool:
        return should_display_property_on_page(self.property_type, page)
