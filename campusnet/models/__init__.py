
from .base_model import Base
from .user_model import User, RoleEnum
from .message_model import Message, MessageType
from .post_model import Post
from .comment_model import Comment
from .notification_model import Notification, NotificationType

# Link tables
from .association_tables import message_recipients, post_likes, comment_likes
