from rest_framework import serializers

from .models import Restaurant, Table


class TableSerializer(serializers.ModelSerializer):
    """Wire shape shared by availability results and restaurant detail."""
    restaurantId = serializers.IntegerField(source="restaurant_id", read_only=True)
    photoUrl = serializers.CharField(source="photo_url", read_only=True)

    class Meta:
        model = Table
        fields = ["id", "restaurantId", "number", "capacity", "photoUrl"]


class RestaurantSerializer(serializers.ModelSerializer):
    maxCapacity = serializers.IntegerField(source="max_capacity", read_only=True)
    tables = TableSerializer(many=True, read_only=True)

    class Meta:
        model = Restaurant
        fields = ["id", "subdomain", "name", "email", "maxCapacity", "tables"]
