from django.contrib import admin

from events.models import Event, Ticket


class TicketInline(admin.TabularInline):
    model = Ticket
    extra = 0
    fields = ["owner", "code", "used"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "date", "created_at"]
    search_fields = ["name"]
    inlines = [TicketInline]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["code", "owner", "event", "used"]
    list_filter = ["used", "event"]
    search_fields = ["code", "owner"]
