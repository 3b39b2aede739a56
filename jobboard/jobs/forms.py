from django import forms

from .models import Job, JobStatus, SalaryType, _tokenize_csv

# API field name -> form field name
WIRE_TO_FORM = {
    "title": "title",
    "description": "description",
    "location": "location",
    "salary": "salary",
    "salaryType": "salary_type",
    "negotiable": "negotiable",
    "jobType": "job_type",
    "tags": "tags",
    "skills": "skills",
    "status": "status",
}
FORM_TO_WIRE = {form_name: wire for wire, form_name in WIRE_TO_FORM.items()}


def job_data_from_payload(payload):
    """Keep the job fields of a request payload, keyed by form field name.

    Both the API (camelCase) and the form (snake_case) spellings are accepted;
    anything else, including attempts to set the owner, is dropped.
    """
    data = {}
    for key, value in payload.items():
        name = WIRE_TO_FORM.get(key) or (key if key in FORM_TO_WIRE else None)
        if name:
            data[name] = value
    return data


def job_data_from_instance(job):
    return {
        "title": job.title,
        "description": job.description,
        "location": job.location,
        "salary": job.salary,
        "salary_type": job.salary_type,
        "negotiable": job.negotiable,
        "job_type": job.job_type,
        "tags": job.tag_names(),
        "skills": job.skills_list(),
        "status": job.status,
    }


class CommaSeparatedListField(forms.Field):
    """Accepts a list of strings or a comma separated string; cleans to a list."""

    def to_python(self, value):
        if value in self.empty_values:
            return []
        if not isinstance(value, (str, list, tuple)):
            raise forms.ValidationError("Enter a list of values.", code="invalid")
        return _tokenize_csv(value)

    def validate(self, value):
        if self.required and not value:
            raise forms.ValidationError(self.error_messages["required"], code="required")


class JobForm(forms.ModelForm):
    tags = CommaSeparatedListField(error_messages={"required": "Tags are required"})
    skills = CommaSeparatedListField(error_messages={"required": "Skills are required"})

    class Meta:
        model = Job
        fields = [
            "title",
            "description",
            "location",
            "salary",
            "salary_type",
            "negotiable",
            "job_type",
            "skills",
            "status",
        ]
        error_messages = {
            "title": {
                "required": "Title is required",
                "max_length": "Job title cannot exceed 100 characters",
            },
            "description": {"required": "Description is required"},
            "location": {
                "required": "Location is required",
                "max_length": "Location cannot exceed 100 characters",
            },
            "salary": {"required": "Salary is required", "invalid": "Salary must be a whole number"},
            "job_type": {"required": "Job Type is required"},
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["salary_type"].required = False
        self.fields["status"].required = False

    def clean_salary(self):
        salary = self.cleaned_data.get("salary")
        # a zero salary is treated as not provided
        if not salary:
            raise forms.ValidationError("Salary is required", code="required")
        return salary

    def clean_salary_type(self):
        return self.cleaned_data.get("salary_type") or SalaryType.YEAR

    def clean_status(self):
        return self.cleaned_data.get("status") or JobStatus.OPEN

    def clean_skills(self):
        return ", ".join(self.cleaned_data.get("skills") or [])

    def save(self, commit=True):
        job = super().save(commit=commit)
        if commit:
            job.set_tags(self.cleaned_data["tags"])
        return job
