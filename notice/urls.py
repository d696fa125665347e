from django.urls import path
from . import views

urlpatterns = [
    path('', views.home, name='home'),
    path('api/notices', views.notices, name='notices'),
    path('api/notices/', views.notices),
]
