"""
Orders API v1 views.
"""
from uuid import UUID

from django.conf import settings
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.products.infrastructure.repositories import DjangoProductRepository
from apps.users.interfaces.permissions import IsProducer
from shared.infrastructure.persistence import DjangoUnitOfWork
from shared.interfaces import StandardPagination, TrustedOriginPermission
from ....application.dtos.order_dto import PlaceOrderDTO, UpdateOrderStatusDTO
from ....application.use_cases import (
    GetOrderQuery,
    GetOrderUseCase,
    PlaceOrderUseCase,
    UpdateOrderStatusUseCase,
)
from ....domain.services.pricing import DeliveryChargePolicy, LineRequest, PricingOracle
from ....infrastructure.queries import orders_for_customer, orders_for_producer
from ....infrastructure.repositories import DjangoInventoryLedger, DjangoOrderRepository
from ...serializers.order_serializer import (
    OrderCreateSerializer,
    OrderSerializer,
    OrderStatusUpdateSerializer,
    OrderSummarySerializer,
    ProducerOrderSerializer,
)

ORDER_PLACED_MESSAGE = 'Order placed successfully! Your fresh produce will be delivered soon.'


def build_place_order_use_case() -> PlaceOrderUseCase:
    """Wire the placement service to its Django collaborators."""
    policy = DeliveryChargePolicy.from_mapping(getattr(settings, 'DELIVERY_CHARGE_POLICY', None))
    return PlaceOrderUseCase(
        pricing_oracle=PricingOracle(
            product_repository=DjangoProductRepository(),
            delivery_policy=policy,
        ),
        order_repository=DjangoOrderRepository(),
        inventory_ledger=DjangoInventoryLedger(),
        unit_of_work=DjangoUnitOfWork,
    )


@extend_schema(tags=['Orders'])
class OrderListCreateView(APIView):
    """Order list and create endpoint."""
    permission_classes = [IsAuthenticated, TrustedOriginPermission]
    pagination_class = StandardPagination

    @extend_schema(
        responses={200: OrderSummarySerializer(many=True)},
        summary="List user's orders",
    )
    def get(self, request):
        paginator = self.pagination_class()
        page = paginator.paginate_queryset(orders_for_customer(request.user.id), request, view=self)
        serializer = OrderSummarySerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    @extend_schema(
        request=OrderCreateSerializer,
        responses={201: OrderSerializer},
        summary="Place an order",
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        details = data['customer_details']
        dto = PlaceOrderDTO(
            customer_id=request.user.id,
            lines=[
                LineRequest(product_id=item['product_id'], quantity=item['quantity'])
                for item in data['items']
            ],
            contact_name=details['contact_name'],
            email=details['email'],
            phone=details['phone'],
            address=details['address'],
            city=details['city'],
            pincode=details['pincode'],
            delivery_date=details['delivery_date'],
            delivery_notes=details.get('delivery_notes', ''),
            payment_method=data['payment_method'],
        )

        order = build_place_order_use_case().execute(dto).unwrap()

        output = OrderSerializer(order).data
        return Response(
            {
                'order': output,
                'orderId': output['id'],
                'total': output['total'],
                'message': ORDER_PLACED_MESSAGE,
            },
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Order detail endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: OrderSerializer},
        summary="Get order detail",
    )
    def get(self, request, order_id: UUID):
        use_case = GetOrderUseCase(order_repository=DjangoOrderRepository())
        order = use_case.execute(GetOrderQuery(order_id=order_id, customer_id=request.user.id)).unwrap()
        return Response(OrderSerializer(order).data)


@extend_schema(tags=['Producer Orders'])
class ProducerOrderListView(APIView):
    """Orders containing the producer's products."""
    permission_classes = [IsAuthenticated, IsProducer]
    pagination_class = StandardPagination

    @extend_schema(
        parameters=[
            OpenApiParameter(name='status', type=str, required=False),
            OpenApiParameter(name='page', type=int, required=False),
        ],
        responses={200: ProducerOrderSerializer(many=True)},
        summary="List orders for the producer's products",
    )
    def get(self, request):
        queryset = orders_for_producer(request.user.id, status=request.query_params.get('status'))
        paginator = self.pagination_class()
        page = paginator.paginate_queryset(queryset, request, view=self)
        serializer = ProducerOrderSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)


@extend_schema(tags=['Producer Orders'])
class ProducerOrderStatusView(APIView):
    """Order status transition endpoint for producers."""
    permission_classes = [IsAuthenticated, IsProducer, TrustedOriginPermission]

    @extend_schema(
        request=OrderStatusUpdateSerializer,
        responses={200: OrderSerializer},
        summary="Update order status",
    )
    def patch(self, request, order_id: UUID):
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = UpdateOrderStatusUseCase(order_repository=DjangoOrderRepository())
        order = use_case.execute(
            UpdateOrderStatusDTO(
                order_id=order_id,
                producer_id=request.user.id,
                status=serializer.validated_data['status'],
            )
        ).unwrap()

        return Response({
            'order': OrderSerializer(order).data,
            'message': f"Order status updated to {order.status}",
        })
