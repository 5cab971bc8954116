"""
Category serializers.
"""
from rest_framework import serializers


class CategorySerializer(serializers.Serializer):
    """Serializer for category output, children included."""
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    parent_id = serializers.CharField(read_only=True, allow_null=True)
    children = serializers.SerializerMethodField()

    def get_children(self, obj):
        return CategorySerializer(obj.children, many=True).data
