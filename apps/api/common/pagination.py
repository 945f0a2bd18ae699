# PATH: apps/api/common/pagination.py
from django.conf import settings

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class FormsPagination(PageNumberPagination):
    """프론트엔드가 총 개수(count)와 results를 기대하므로 응답에 count 포함."""
    page_size = settings.FORMS_PAGE_SIZE
    page_size_query_param = "page_size"
    max_page_size = 100

    def get_paginated_response(self, data):
        return Response({
            "count": self.page.paginator.count,
            "page_size": self.page.paginator.per_page,
            "current_page": self.page.number,
            "last_page": self.page.paginator.num_pages,
            "next": self.get_next_link(),
            "previous": self.get_previous_link(),
            "results": data,
        })
