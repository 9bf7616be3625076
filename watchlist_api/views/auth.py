"""Account views.

Login opens a Django session, which the watchlist page and its form actions
rely on, and also hands out JWT tokens for API clients such as
``watchlist_client``.
"""

import logging
from django.contrib.auth import authenticate, get_user_model, login as django_login, logout as django_logout
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from watchlist_api.views.api import get_watchlist_store

logger = logging.getLogger(__name__)
User = get_user_model()


def issue_tokens(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


def account_payload(user):
    return {
        'email': user.email,
        'name': user.get_full_name(),
        'auth_provider': user.auth_provider,
        'authenticated': True,
    }


class RegisterView(APIView):
    """Create an email/password account and sign it in."""

    permission_classes = [AllowAny]

    def post(self, request):
        email = (request.data.get('email') or '').strip().lower()
        password = request.data.get('password') or ''
        name = (request.data.get('name') or '').strip()

        try:
            validate_email(email)
        except ValidationError:
            return Response({'error': 'Invalid email address'}, status=status.HTTP_400_BAD_REQUEST)

        try:
            validate_password(password)
        except ValidationError as e:
            return Response({'error': ' '.join(e.messages)}, status=status.HTTP_400_BAD_REQUEST)

        if User.objects.filter(email=email).exists():
            return Response({'error': 'Email already registered'}, status=status.HTTP_409_CONFLICT)

        try:
            user = User.objects.create_user(email=email, password=password, name=name)
        except Exception as e:
            logger.error(f"Registration failed for {email}: {e}")
            return Response(
                {'error': 'Registration failed. Please try again.'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        django_login(request, user, backend='django.contrib.auth.backends.ModelBackend')
        logger.info(f"New user registered: {email}")

        return Response({
            'success': True,
            'user': account_payload(user),
            'tokens': issue_tokens(user),
        }, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """Sign in with email and password."""

    permission_classes = [AllowAny]

    def post(self, request):
        email = (request.data.get('email') or '').strip().lower()
        password = request.data.get('password') or ''

        if not email or not password:
            return Response(
                {'error': 'Email and password are required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        # ModelBackend also rejects inactive accounts
        user = authenticate(request, username=email, password=password)
        if user is None:
            logger.info(f"Failed sign-in for {email}")
            return Response({'error': 'Invalid email or password'}, status=status.HTTP_401_UNAUTHORIZED)

        django_login(request, user)
        logger.info(f"User logged in: {email}")

        return Response(dict(account_payload(user), success=True, tokens=issue_tokens(user)))


class LogoutView(APIView):
    """End the session; blacklist the refresh token when one is posted."""

    permission_classes = [IsAuthenticated]

    def post(self, request):
        refresh_token = request.data.get('refresh')
        if refresh_token:
            try:
                RefreshToken(refresh_token).blacklist()
            except TokenError as e:
                logger.warning(f"Logout with unusable refresh token: {e}")

        django_logout(request)
        return Response({'success': True})


class CurrentUserView(APIView):
    """The signed-in account and the symbols on its watchlist."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        user = request.user
        result = get_watchlist_store().list_symbols(user.email)
        return Response(dict(account_payload(user), watchlist=result.symbols))
