from rest_framework import serializers

from .models import ContactMessage

REQUIRED = {
    'required': 'Este campo es obligatorio',
    'blank': 'Este campo es obligatorio',
}


class ContactMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactMessage
        fields = ['id', 'name', 'email', 'subject', 'message', 'created_at']
        read_only_fields = ['id', 'created_at']
        extra_kwargs = {
            'name': {'error_messages': REQUIRED},
            'email': {'error_messages': {**REQUIRED, 'invalid': 'Email inválido'}},
            'subject': {'error_messages': REQUIRED},
            'message': {'error_messages': REQUIRED},
        }
