# listings/views.py
import logging
import re

from django.db.models import Q
from django.http import Http404, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_GET

from .categories import (
    CATEGORY_PAGE_TITLES,
    PROPERTY_TYPE_TO_CATEGORY,
    get_category_page_for_property_type,
    get_property_type_display_name,
    get_property_types_for_category_page,
    get_sub_categories_for_property_type,
    is_category_page,
    should_display_property_on_page,
)
from .forms import PropertyForm
from .models import Property


log = logging.getLogger(__name__)


def _subcategories_payload(property_type):
    return [sub._asdict() for sub in get_sub_categories_for_property_type(property_type)]


def _search(props, q):
    tokens = [t for t in re.split(r"\s+", q) if t]
    for tok in tokens:
        props = props.filter(
            Q(title__icontains=tok)
            | Q(address__icontains=tok)
            | Q(external_id__icontains=tok)
        )
    return props


def healthz(request):
    return HttpResponse("ok", content_type="text/plain")


@require_GET
def category_page(request, page):
    if not is_category_page(page):
        log.info("unknown category page requested: %s", page)
        raise Http404(f"Unknown category page: {page}")

    property_types = get_property_types_for_category_page(page)
    q = request.GET.get("q", "").strip()
    sub = request.GET.get("sub", "").strip()

    props = Property.objects.filter(is_archived=False, property_type__in=property_types)
    if sub:
        props = props.filter(subcategory=sub)
    if q:
        props = _search(props, q)

    rows = [
        prop
        for prop in props.order_by("-updated_at", "-id")
        if should_display_property_on_page(prop.property_type, page)
    ]

    filters = []
    for property_type in property_types:
        filters.append(
            {
                "property_type": property_type,
                "display_name": get_property_type_display_name(property_type),
                "subcategories": get_sub_categories_for_property_type(property_type),
            }
        )

    return render(
        request,
        "listings/category_page.html",
        {
            "page": page,
            "page_title": CATEGORY_PAGE_TITLES[page],
            "rows": rows,
            "filters": filters,
            "q": q,
            "sub": sub,
        },
    )


def property_create(request):
    if request.method == "POST":
        form = PropertyForm(request.POST)
        if form.is_valid():
            prop = form.save()
            log.info(
                "listing %s created (%s/%s)",
                prop.external_id,
                prop.property_type,
                prop.subcategory or "-",
            )
            return redirect(reverse("category_page", args=[prop.category_page]))
        log.debug("listing form invalid: %s", form.errors.as_json())
    else:
        initial = {}
        property_type = request.GET.get("property_type", "").strip()
        if property_type:
            initial["property_type"] = property_type
        form = PropertyForm(initial=initial)

    return render(request, "listings/property_form.html", {"form": form})


@require_GET
def api_categories(request):
    data = []
    for property_type, mapping in PROPERTY_TYPE_TO_CATEGORY.items():
        data.append(
            {
                "property_type": mapping.property_type,
                "category_page": mapping.category_page,
                "display_name": mapping.display_name,
                "description": mapping.description,
                "subcategories": _subcategories_payload(property_type),
            }
        )
    return JsonResponse({"categories": data})


@require_GET
def api_subcategories(request, property_type):
    return JsonResponse(
        {
            "property_type": property_type,
            "display_name": get_property_type_display_name(property_type),
            "category_page": get_category_page_for_property_type(property_type),
            "subcategories": _subcategories_payload(property_type),
        }
    )
