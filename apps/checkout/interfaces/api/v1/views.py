"""
Checkout API v1 views.
"""
import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.cart.infrastructure.cart_state import load_cart_state, save_cart_state
from apps.orders.domain.exceptions import OrderConfirmationNotFoundError
from apps.orders.interfaces.serializers import OrderConfirmationSerializer
from ....application.dtos import CheckoutSessionDTO, StartCheckoutDTO
from ....application.use_cases import StartCheckoutUseCase
from ....domain.exceptions import CheckoutNotStartedError
from ....domain.services import CheckoutStateMachine
from ....domain.services.checkout_state_machine import CHECKOUT_ABANDONED
from ....domain.value_objects import field_update_for
from ....infrastructure.providers import get_order_gateway, get_success_projection
from ....infrastructure.repositories import SessionCheckoutRepository
from ....infrastructure.session import DjangoSessionStore
from ...serializers import CheckoutSessionSerializer, CheckoutFieldsSerializer

logger = logging.getLogger(__name__)

CONFIRMATION_SESSION_KEY = 'orderConfirmation'

FAILURE_STATUS = {
    'VALIDATION_ERROR': status.HTTP_422_UNPROCESSABLE_ENTITY,
    'SUBMISSION_IN_PROGRESS': status.HTTP_409_CONFLICT,
    'CHECKOUT_ABANDONED': status.HTTP_409_CONFLICT,
    'CHECKOUT_NOT_STARTED': status.HTTP_409_CONFLICT,
    'GATEWAY_UNAVAILABLE': status.HTTP_502_BAD_GATEWAY,
}


class CheckoutContext:
    """Everything one checkout request works with, rebuilt from the session."""

    def __init__(self, request):
        self.session = request.session
        self.repository = SessionCheckoutRepository(self.session)
        self.cart_state = load_cart_state(self.session)

    def load_machine(self) -> CheckoutStateMachine:
        checkout = self.repository.load()
        if checkout is None:
            raise CheckoutNotStartedError()
        return CheckoutStateMachine(
            session=checkout,
            cart=self.cart_state.cart,
            gateway=get_order_gateway(),
            session_store=DjangoSessionStore(self.session),
            promotions=self.cart_state.promotions,
            projection=get_success_projection(),
            repository=self.repository,
        )

    def save(self, machine: CheckoutStateMachine) -> None:
        self.repository.save(machine.session)

    def finish(self, machine: CheckoutStateMachine, result):
        """Persist a transition result unless the checkout was abandoned meanwhile."""
        if not result.success and result.error_code == CHECKOUT_ABANDONED:
            logger.info("Dropping a result for an abandoned checkout")
            return Response(
                {'error': result.error, 'code': result.error_code},
                status=FAILURE_STATUS[CHECKOUT_ABANDONED],
            )
        self.save(machine)
        return self.checkout_response(machine, result)

    def checkout_response(self, machine: CheckoutStateMachine, result=None, status_code=status.HTTP_200_OK):
        data = dict(CheckoutSessionSerializer(CheckoutSessionDTO.from_entity(machine.session)).data)
        if result is not None and not result.success:
            data['error'] = result.error
            data['code'] = result.error_code
            status_code = FAILURE_STATUS.get(result.error_code, status.HTTP_400_BAD_REQUEST)
        return Response(data, status=status_code)


def _log_domain_events(checkout) -> None:
    for event in checkout.clear_domain_events():
        logger.info(f"Domain event {event.event_type}: {event}")


@extend_schema(tags=['Checkout'])
class CheckoutView(APIView):
    """Checkout session endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CheckoutSessionSerializer},
        summary="Get the current checkout",
    )
    def get(self, request):
        context = CheckoutContext(request)
        machine = context.load_machine()
        return context.checkout_response(machine)

    @extend_schema(
        responses={201: CheckoutSessionSerializer},
        summary="Start checkout from the session cart",
    )
    def post(self, request):
        context = CheckoutContext(request)
        store = DjangoSessionStore(request.session)
        use_case = StartCheckoutUseCase(gateway=get_order_gateway(), session_store=store)

        result = use_case.execute(
            StartCheckoutDTO(cart=context.cart_state.cart, promotions=context.cart_state.promotions)
        )
        if not result.success:
            return Response(
                {'error': result.error, 'code': result.error_code},
                status=FAILURE_STATUS.get(result.error_code, status.HTTP_400_BAD_REQUEST),
            )

        request.session.pop(CONFIRMATION_SESSION_KEY, None)
        context.repository.save(result.data)
        serializer = CheckoutSessionSerializer(CheckoutSessionDTO.from_entity(result.data))
        return Response(serializer.data, status=status.HTTP_201_CREATED)

    @extend_schema(summary="Abandon the current checkout")
    def delete(self, request):
        context = CheckoutContext(request)
        checkout = context.repository.load()
        if checkout is not None:
            checkout.abandon()
            context.repository.delete()
            logger.info(f"Checkout abandoned in '{checkout.phase.value}' phase")
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Checkout'])
class CheckoutFieldsView(APIView):
    """Form edit endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=CheckoutFieldsSerializer,
        responses={200: CheckoutSessionSerializer},
        summary="Update checkout form fields",
    )
    def patch(self, request):
        serializer = CheckoutFieldsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        context = CheckoutContext(request)
        machine = context.load_machine()
        commands = [
            field_update_for(name, value)
            for name, value in serializer.validated_data['updates'].items()
        ]
        for command in commands:
            machine.update(command)
        context.save(machine)
        return context.checkout_response(machine)


@extend_schema(tags=['Checkout'])
class CheckoutAdvanceView(APIView):
    """Personal/address phase to payment phase."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CheckoutSessionSerializer},
        summary="Validate the address and continue to payment",
    )
    def post(self, request):
        context = CheckoutContext(request)
        machine = context.load_machine()
        result = machine.advance()
        return context.finish(machine, result)


@extend_schema(tags=['Checkout'])
class CheckoutBackView(APIView):
    """Payment phase back to the personal/address phase."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: CheckoutSessionSerializer},
        summary="Return to the address step",
    )
    def post(self, request):
        context = CheckoutContext(request)
        machine = context.load_machine()
        machine.back()
        context.save(machine)
        return context.checkout_response(machine)


@extend_schema(tags=['Checkout'])
class CheckoutSubmitView(APIView):
    """Payment phase to order creation."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={201: OrderConfirmationSerializer},
        summary="Validate payment and place the order",
    )
    def post(self, request):
        context = CheckoutContext(request)
        machine = context.load_machine()
        result = machine.submit()
        if not result.success:
            return context.finish(machine, result)

        _log_domain_events(machine.session)
        save_cart_state(request.session, context.cart_state)
        context.repository.delete()

        confirmation = result.data.to_dict()
        request.session[CONFIRMATION_SESSION_KEY] = confirmation
        serializer = OrderConfirmationSerializer(confirmation)
        return Response(serializer.data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Checkout'])
class CheckoutSuccessView(APIView):
    """Confirmation of the last order placed in this session."""
    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: OrderConfirmationSerializer},
        summary="Get the order confirmation",
    )
    def get(self, request):
        confirmation = request.session.get(CONFIRMATION_SESSION_KEY)
        if not confirmation:
            raise OrderConfirmationNotFoundError()
        return Response(OrderConfirmationSerializer(confirmation).data)
