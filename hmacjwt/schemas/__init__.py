from hmacjwt.schemas.token import Header, ParsedToken
