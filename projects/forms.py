from django import forms
from .models import Category, Project, Technology
from .services.review_service import DECISION_STATUSES


class ProjectSubmissionForm(forms.ModelForm):
    """Form students use to submit a new project"""
    technologies = forms.ModelMultipleChoiceField(
        queryset=Technology.objects.order_by('name'),
        required=False,
        widget=forms.CheckboxSelectMultiple,
        label="Technologies Used",
    )

    class Meta:
        model = Project
        fields = ['title', 'description', 'category', 'technologies', 'github_link', 'demo_link']
        labels = {
            'title': 'Project Title',
            'description': 'Description',
            'category': 'Category',
            'github_link': 'GitHub Repository',
            'demo_link': 'Live Demo URL',
        }
        widgets = {
            'title': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'My Awesome Project',
                'maxlength': '200',
            }),
            'description': forms.Textarea(attrs={
                'class': 'form-control',
                'rows': 5,
                'placeholder': 'Describe your project, its goals, and key features...',
            }),
            'github_link': forms.URLInput(attrs={
                'class': 'form-control',
                'placeholder': 'https://github.com/username/repo',
            }),
            'demo_link': forms.URLInput(attrs={
                'class': 'form-control',
                'placeholder': 'https://myproject.com',
            }),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['category'].queryset = Category.objects.order_by('name')
        self.fields['category'].empty_label = "Select category"


class ReviewForm(forms.Form):
    """Supervisor decision on a project; the pressed button carries the status"""
    status = forms.ChoiceField(choices=[(s.value, s.label) for s in DECISION_STATUSES])
    comment = forms.CharField(
        required=False,
        widget=forms.Textarea(attrs={
            'class': 'form-control',
            'rows': 4,
            'placeholder': 'Add feedback or comments...',
        }),
    )
