from django import forms

from rosters.services.creator import RosterCreator


class RosterForm(forms.Form):
    identifier_name = forms.CharField(
        max_length=255,
        initial=RosterCreator.DEFAULT_IDENTIFIER_NAME,
        help_text="What your students are identified by, e.g. Email or Student ID.",
    )
    identifiers = forms.CharField(
        widget=forms.Textarea(attrs={"rows": 10}),
        help_text="One student per line.",
    )


class AddStudentsForm(forms.Form):
    identifiers = forms.CharField(
        widget=forms.Textarea(attrs={"rows": 5}),
        help_text="One student per line.",
    )
