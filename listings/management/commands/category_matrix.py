from django.core.management.base import BaseCommand

from listings.categories import (
    CATEGORY_PAGES,
    PROPERTY_TYPE_TO_CATEGORY,
    get_property_types_for_category_page,
    get_sub_categories_for_property_type,
)


class Command(BaseCommand):
    help = "Prints the matrix: property type → category page → subcategories"

    def handle(self, *args, **opts):
        self.stdout.write("PROPERTY TYPES:")
        for property_type, mapping in PROPERTY_TYPE_TO_CATEGORY.items():
            self.stdout.write(
                f"  [{property_type}] {mapping.display_name} -> /{mapping.category_page}/"
            )
            for sub in get_sub_categories_for_property_type(property_type):
                self.stdout.write(f"    {sub.value:28} {sub.label}")

        self.stdout.write("\nCATEGORY PAGES:")
        for page in CATEGORY_PAGES:
            types = get_property_types_for_category_page(page)
            self.stdout.write(f"  {page:14} -> {', '.join(types) or '-'}")
