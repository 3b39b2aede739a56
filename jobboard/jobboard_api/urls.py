from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/', include('accounts.urls')),
    path('api/v1/', include('jobs.urls')),
]

if settings.DEBUG:
    # Resumes are served by the web server in production.
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

handler404 = "jobboard_api.views.route_not_found"
handler400 = "jobboard_api.views.bad_request"
handler403 = "jobboard_api.views.permission_denied"
