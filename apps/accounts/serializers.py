from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(
        error_messages={
            'required': 'Por favor completa todos los campos',
            'blank': 'Por favor completa todos los campos',
            'invalid': 'Email inválido',
        }
    )
    password = serializers.CharField(
        trim_whitespace=False,
        error_messages={
            'required': 'Por favor completa todos los campos',
            'blank': 'Por favor completa todos los campos',
        }
    )


class AdminUserSerializer(serializers.Serializer):
    uid = serializers.IntegerField()
    email = serializers.EmailField()
    is_admin = serializers.BooleanField()
    display_name = serializers.CharField(allow_null=True)
