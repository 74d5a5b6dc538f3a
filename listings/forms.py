# listings/forms.py
from django import forms

from .categories import (
    get_property_type_display_name,
    get_sub_categories_for_property_type,
    is_property_type,
    is_valid_subcategory,
)
from .models import Property


def _first_non_empty(*values):
    for value in values:
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return ""


class PropertyForm(forms.ModelForm):
    SUBCATEGORY_PLACEHOLDER = "---------"

    class Meta:
        model = Property
        fields = [
            "title",
            "property_type",
            "subcategory",
            "price",
            "address",
            "description",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 4}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        property_type = self._selected_property_type()
        choices = [("", self.SUBCATEGORY_PLACEHOLDER)]
        choices.extend(get_sub_categories_for_property_type(property_type))
        # Plain CharField: membership is checked against property_type in clean().
        self.fields["subcategory"] = forms.CharField(
            label=self.fields["subcategory"].label,
            required=False,
            widget=forms.Select(choices=choices),
        )

    def _selected_property_type(self):
        data_value = self.data.get(self.add_prefix("property_type")) if self.is_bound else None
        return _first_non_empty(
            data_value,
            (self.initial or {}).get("property_type"),
            getattr(self.instance, "property_type", ""),
        ).lower()

    def clean(self):
        cleaned_data = super().clean()

        property_type = (cleaned_data.get("property_type") or "").strip()
        subcategory = (cleaned_data.get("subcategory") or "").strip()

        if not is_property_type(property_type):
            if "property_type" not in self.errors:
                self.add_error("property_type", "Choose a property type.")
            return cleaned_data

        if subcategory and not is_valid_subcategory(property_type, subcategory):
            self.add_error(
                "subcategory",
                f"“{subcategory}” is not a subcategory of "
                f"{get_property_type_display_name(property_type)}.",
            )
            return cleaned_data

        cleaned_data["subcategory"] = subcategory
        return cleaned_data
