from rest_framework import serializers

from social.models import Comment, Notification, Post, Reply, User


class UserSummarySerializer(serializers.ModelSerializer):
    """Compact user used inside relationship lists."""

    class Meta:
        model = User
        fields = ["id", "fullname", "username"]


class UserSerializer(serializers.ModelSerializer):
    """Full profile. ``token`` is only present right after signup/login."""
    profileImg = serializers.CharField(source="profile_img", read_only=True)
    coverImg = serializers.CharField(source="cover_img", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    followers = serializers.SerializerMethodField()
    following = serializers.SerializerMethodField()
    likedPosts = serializers.SerializerMethodField()
    savedPosts = serializers.SerializerMethodField()
    token = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "fullname",
            "username",
            "email",
            "role",
            "token",
            "followers",
            "following",
            "likedPosts",
            "savedPosts",
            "link",
            "profileImg",
            "coverImg",
            "createdAt",
        ]

    def get_followers(self, obj):
        users = User.objects.filter(following__author=obj)
        return UserSummarySerializer(users, many=True).data

    def get_following(self, obj):
        users = User.objects.filter(followers__follower=obj)
        return UserSummarySerializer(users, many=True).data

    def get_likedPosts(self, obj):
        return [str(pk) for pk in obj.liked_post_ids]

    def get_savedPosts(self, obj):
        return [str(pk) for pk in obj.saved_post_ids]

    def get_token(self, obj):
        return getattr(obj, "token", None)


class ReplySerializer(serializers.ModelSerializer):
    postId = serializers.UUIDField(source="post_id", read_only=True)
    commentId = serializers.UUIDField(source="comment_id", read_only=True)
    userId = serializers.UUIDField(source="user_id", read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Reply
        fields = ["id", "content", "postId", "commentId", "userId", "username", "createdAt"]


class CommentSerializer(serializers.ModelSerializer):
    postId = serializers.UUIDField(source="post_id", read_only=True)
    userId = serializers.UUIDField(source="user_id", read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    replies = serializers.SerializerMethodField()

    class Meta:
        model = Comment
        fields = ["id", "content", "postId", "userId", "username", "replies", "createdAt"]

    def get_replies(self, obj):
        return ReplySerializer(obj.replies.select_related("user").order_by("created_at"), many=True).data


class PostSerializer(serializers.ModelSerializer):
    userId = serializers.UUIDField(source="user_id", read_only=True)
    username = serializers.CharField(source="user.username", read_only=True)
    imageUrl = serializers.CharField(source="image_url", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    likes = serializers.SerializerMethodField()
    comments = serializers.SerializerMethodField()

    class Meta:
        model = Post
        fields = ["id", "content", "userId", "username", "likes", "comments", "imageUrl", "createdAt"]

    def get_likes(self, obj):
        return [str(pk) for pk in obj.liker_ids]

    def get_comments(self, obj):
        comments = obj.comments.select_related("user").order_by("-created_at")
        return CommentSerializer(comments, many=True).data


class NotificationSerializer(serializers.ModelSerializer):
    to = serializers.UUIDField(source="recipient_id", read_only=True)
    type = serializers.CharField(source="notification_type", read_only=True)
    read = serializers.BooleanField(source="is_read", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Notification
        fields = ["id", "to", "type", "read", "createdAt"]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        # "from" is a keyword, so it cannot be a declared field name.
        data["from"] = UserSummarySerializer(instance.sender).data
        return data
