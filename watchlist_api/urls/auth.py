"""Account endpoints, mounted under /auth/."""

from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from watchlist_api.views import auth

urlpatterns = [
    path('register', auth.RegisterView.as_view(), name='auth-register'),
    path('login', auth.LoginView.as_view(), name='auth-login'),
    path('logout', auth.LogoutView.as_view(), name='auth-logout'),
    path('me', auth.CurrentUserView.as_view(), name='auth-me'),
    path('token/refresh', TokenRefreshView.as_view(), name='auth-token-refresh'),
]
