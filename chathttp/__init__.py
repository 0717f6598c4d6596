"""
A request line and body extractor for the chat server's HTTP/1.1 requests.

A raw request is split into its method, target and protocol version, and for
POST/PUT/PATCH the body is cut out of the text between the request line and
the closing CRLF. Bodies can then be decoded into chat or message objects.

accepted methods:

method      body
GET         no
HEAD        no
DELETE      no
CONNECT     no
OPTIONS     no
TRACE       no
POST        yes
PUT         yes
PATCH       yes

only HTTP/1.1 is accepted.

examples:

# show the request line of a saved request
chathttp -v request.txt

# decode the bodies of several requests as messages
chathttp -m message post1.txt post2.txt
"""
__version__ = "0.3.0"
