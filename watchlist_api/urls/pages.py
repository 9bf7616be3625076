"""Page URL configuration: watchlist page, its form actions and sign-in."""

from django.contrib.auth import views as auth_views
from django.urls import path
from watchlist_api.views import pages

urlpatterns = [
    path('watchlist/', pages.watchlist_page, name='watchlist-page'),
    path('watchlist/add', pages.add_action, name='watchlist-add-action'),
    path('watchlist/remove', pages.remove_action, name='watchlist-remove-action'),

    path(
        'sign-in',
        auth_views.LoginView.as_view(template_name='registration/sign_in.html'),
        name='sign-in',
    ),
]
