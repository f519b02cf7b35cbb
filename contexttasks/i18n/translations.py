# -*- coding: utf-8 -*-
"""
Translation dictionaries for German and English.

This module contains all translatable strings for the ContextTasks application.
"""

TRANSLATIONS = {
    "en": {
        # Application
        "app.name": "ContextTasks",

        # Contexts
        "context.quick": "Quick",
        "context.focused": "Focused",
        "context.low-energy": "Low-energy",
        "context.quick.hint": "≤15 minutes",
        "context.focused.hint": "Deep work",
        "context.low-energy.hint": "Easy mode",
        "context.quick.list": "Quick tasks",
        "context.focused.list": "Focused work",
        "context.low-energy.list": "Easy tasks",

        # Context picker
        "picker.title": "What's your energy?",
        "picker.subtitle": "Choose what fits right now",
        "picker.dashboard": "Dashboard",
        "picker.settings": "Settings",
        "picker.count.one": "{count} task",
        "picker.count.other": "{count} tasks",

        # Reminder banner
        "reminder.title": "Tasks ready for you",
        "reminder.body.one": "You have {count} task that might match your energy right now.",
        "reminder.body.other": "You have {count} tasks that might match your energy right now.",
        "reminder.dismiss": "Got it",

        # Task list
        "list.back": "← Change context",
        "list.new": "+ New task",
        "list.count.one": "{count} task",
        "list.count.other": "{count} tasks",
        "list.total": "{time} total",
        "list.sort_duration": "By duration",
        "list.sort_created": "Most recent",
        "list.empty_title": "No {label} right now",
        "list.empty_hint": "Your energy might be better spent elsewhere, or create a new task.",
        "list.completed_today": "Completed today",
        "list.complete": "Done",
        "list.edit": "Edit",
        "list.delete": "Delete",
        "list.confirm_delete_title": "Delete task",
        "list.confirm_delete_msg": "Delete this task?",
        "list.duration": "~{minutes} min",

        # Task form
        "form.back": "← Back",
        "form.title": "What needs doing?",
        "form.title_placeholder": "e.g., Review Q4 budget proposal",
        "form.context": "Energy level required",
        "form.duration": "Duration: {minutes} min",
        "form.tags": "Tags (optional)",
        "form.tag_placeholder": "Add tag",
        "form.add_tag": "Add",
        "form.note": "Note (optional)",
        "form.save": "Save task",
        "form.cancel": "Cancel",
        "form.edit_title": "Edit task",
        "form.title_required": "Please enter a title.",

        # Completion feedback
        "feedback.completed": "✓ Task completed!",

        # Dashboard
        "dashboard.title": "Dashboard",
        "dashboard.close": "Close",
        "dashboard.total": "Total tasks completed",
        "dashboard.by_context": "By context",
        "dashboard.context_share": "{count} ({percentage:.0f}%)",
        "dashboard.last_days": "Last 7 days",
        "dashboard.peak_hours": "Peak hours",
        "dashboard.day_tooltip": "{count} tasks on {day}",
        "dashboard.export": "Export report",
        "dashboard.export_done": "Report saved to {path}",

        # Settings
        "settings.title": "Settings",
        "settings.reminders": "In-app reminders",
        "settings.reminders_hint": "Get gentle reminders when you have tasks available",
        "settings.window": "Preferred reminder time",
        "settings.window.morning": "Morning (6 AM - 12 PM)",
        "settings.window.afternoon": "Afternoon (12 PM - 6 PM)",
        "settings.window.evening": "Evening (6 PM - 12 AM)",
        "settings.window.anytime": "Anytime",
        "settings.appearance": "Appearance",
        "settings.theme": "Theme:",
        "settings.theme_auto": "Auto",
        "settings.theme_light": "Light",
        "settings.theme_dark": "Dark",
        "settings.language": "Language:",
        "settings.clear_title": "Clear all data",
        "settings.clear_hint": "This will permanently delete all your tasks, settings, and statistics.",
        "settings.clear_confirm": "Yes, delete all",
        "settings.restart_hint": "Language changes apply after restart.",

        # Generic
        "error": "Error",
        "error.unexpected": "Something went wrong: {error}",
    },
    "de": {
        "app.name": "ContextTasks",

        "context.quick": "Schnell",
        "context.focused": "Fokussiert",
        "context.low-energy": "Wenig Energie",
        "context.quick.hint": "≤15 Minuten",
        "context.focused.hint": "Konzentriertes Arbeiten",
        "context.low-energy.hint": "Leichter Modus",
        "context.quick.list": "Schnelle Aufgaben",
        "context.focused.list": "Fokussierte Arbeit",
        "context.low-energy.list": "Leichte Aufgaben",

        "picker.title": "Wie ist deine Energie?",
        "picker.subtitle": "Wähle, was gerade passt",
        "picker.dashboard": "Übersicht",
        "picker.settings": "Einstellungen",
        "picker.count.one": "{count} Aufgabe",
        "picker.count.other": "{count} Aufgaben",

        "reminder.title": "Aufgaben warten auf dich",
        "reminder.body.one": "Du hast {count} Aufgabe, die gerade zu deiner Energie passen könnte.",
        "reminder.body.other": "Du hast {count} Aufgaben, die gerade zu deiner Energie passen könnten.",
        "reminder.dismiss": "Verstanden",

        "list.back": "← Kontext wechseln",
        "list.new": "+ Neue Aufgabe",
        "list.count.one": "{count} Aufgabe",
        "list.count.other": "{count} Aufgaben",
        "list.total": "{time} gesamt",
        "list.sort_duration": "Nach Dauer",
        "list.sort_created": "Neueste",
        "list.empty_title": "Gerade keine {label}",
        "list.empty_hint": "Nutze deine Energie anderweitig oder lege eine neue Aufgabe an.",
        "list.completed_today": "Heute erledigt",
        "list.complete": "Erledigt",
        "list.edit": "Bearbeiten",
        "list.delete": "Löschen",
        "list.confirm_delete_title": "Aufgabe löschen",
        "list.confirm_delete_msg": "Diese Aufgabe löschen?",
        "list.duration": "~{minutes} Min.",

        "form.back": "← Zurück",
        "form.title": "Was ist zu tun?",
        "form.title_placeholder": "z. B. Budgetvorschlag Q4 prüfen",
        "form.context": "Benötigte Energie",
        "form.duration": "Dauer: {minutes} Min.",
        "form.tags": "Schlagwörter (optional)",
        "form.tag_placeholder": "Schlagwort hinzufügen",
        "form.add_tag": "Hinzufügen",
        "form.note": "Notiz (optional)",
        "form.save": "Aufgabe speichern",
        "form.cancel": "Abbrechen",
        "form.edit_title": "Aufgabe bearbeiten",
        "form.title_required": "Bitte einen Titel eingeben.",

        "feedback.completed": "✓ Aufgabe erledigt!",

        "dashboard.title": "Übersicht",
        "dashboard.close": "Schließen",
        "dashboard.total": "Erledigte Aufgaben insgesamt",
        "dashboard.by_context": "Nach Kontext",
        "dashboard.context_share": "{count} ({percentage:.0f} %)",
        "dashboard.last_days": "Letzte 7 Tage",
        "dashboard.peak_hours": "Aktivste Stunden",
        "dashboard.day_tooltip": "{count} Aufgaben am {day}",
        "dashboard.export": "Bericht exportieren",
        "dashboard.export_done": "Bericht gespeichert unter {path}",

        "settings.title": "Einstellungen",
        "settings.reminders": "Erinnerungen in der App",
        "settings.reminders_hint": "Sanfte Erinnerungen, wenn Aufgaben anstehen",
        "settings.window": "Bevorzugte Erinnerungszeit",
        "settings.window.morning": "Morgens (6 - 12 Uhr)",
        "settings.window.afternoon": "Nachmittags (12 - 18 Uhr)",
        "settings.window.evening": "Abends (18 - 24 Uhr)",
        "settings.window.anytime": "Jederzeit",
        "settings.appearance": "Darstellung",
        "settings.theme": "Design:",
        "settings.theme_auto": "Automatisch",
        "settings.theme_light": "Hell",
        "settings.theme_dark": "Dunkel",
        "settings.language": "Sprache:",
        "settings.clear_title": "Alle Daten löschen",
        "settings.clear_hint": "Damit werden alle Aufgaben, Einstellungen und Statistiken endgültig gelöscht.",
        "settings.clear_confirm": "Ja, alles löschen",
        "settings.restart_hint": "Sprachänderungen werden nach einem Neustart wirksam.",

        "error": "Fehler",
        "error.unexpected": "Etwas ist schiefgelaufen: {error}",
    },
}
