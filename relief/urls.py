from django.urls import path
from . import views

app_name = 'relief'

urlpatterns = [
    path('', views.landing, name='landing'),
    path('borang/', views.record_create, name='record_create'),
    path('login/', views.admin_login, name='login'),
    path('logout/', views.admin_logout, name='logout'),
    path('admin-panel/', views.dashboard, name='dashboard'),
    path('admin-panel/records/<str:record_id>/delete/', views.record_delete, name='record_delete'),
    path('admin-panel/reset/', views.reset_records, name='reset_records'),
    path('admin-panel/report/pdf/', views.export_report_pdf, name='export_report_pdf'),
    path('admin-panel/report/xlsx/', views.export_report_xlsx, name='export_report_xlsx'),
]
