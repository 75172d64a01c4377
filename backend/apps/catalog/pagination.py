from rest_framework.pagination import PageNumberPagination


class JewelleryListPagination(PageNumberPagination):
    # No default page size: the list is only paginated when `?limit=` is sent
    page_size = None
    page_size_query_param = 'limit'
    max_page_size = 100
