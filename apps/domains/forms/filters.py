import django_filters

from .models import Form


class FormFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Form.Status.choices)
    type = django_filters.ChoiceFilter(choices=Form.Type.choices)
    title = django_filters.CharFilter(field_name="title", lookup_expr="icontains")

    class Meta:
        model = Form
        fields = [
            "status",
            "type",
            "title",
        ]
